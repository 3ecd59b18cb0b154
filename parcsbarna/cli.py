"""Interactive menu for searching, adding, editing and deleting parks."""

from __future__ import annotations

import argparse
import sys
from typing import Callable

from parcsbarna.models import prompt_location, prompt_play_object
from parcsbarna.park import Park
from parcsbarna.registry import ParkRegistry, RecordError, load_registry

Ask = Callable[[str], str]
Say = Callable[[str], None]

DEFAULT_DATA_FILE = "DATA.txt"

_MAIN_MENU = " - SEARCH (a)\n\n - ADD/EDIT/DELET (b)\n\n - DELETE (c)\n\n"
_NOT_FOUND = " El valor insertat no existeix, torna a insertar un valor existent: "
_NO_OBJECTS = " !! Al no tenir cap objecte no s'ha guardat correctament !!"


def _ask_int(ask: Ask, prompt: str) -> int | None:
    """Read an integer answer; anything else gives None."""
    tokens = ask(prompt).split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _show(say: Say, text: str) -> None:
    say(text.rstrip("\n"))


def edit_session(registry: ParkRegistry, ask: Ask, say: Say) -> None:
    """Edit the location or the objects of parks until the user leaves."""
    while True:
        aj_id = _ask_int(ask, " Inserta el ID de l'area de Joc que vols editar: ")
        if aj_id is None or aj_id not in registry:
            say(_NOT_FOUND)
            continue
        choice = _ask_int(
            ask,
            " - Editar la localitzacio (1)\n\n - Editar els objectes (2)\n\n"
            " - Surt de l'editor (3)\n\n ---> ",
        )
        if choice == 2:
            park = registry.get(aj_id)
            number = _ask_int(
                ask,
                f" Pots editar {len(park)}, inserta el seguent objecte que vulguis editar, "
                "o surt de l'editor d'objectes insertan cualsevol tecla: \n\n ---> ",
            )
            if number is None or not 1 <= number <= len(park):
                return
            _show(say, park.objects[number - 1].render())
            say(" As escollit aquest objecte. ")
            registry.edit_object(aj_id, number - 1, prompt_play_object(ask))
        elif choice == 1:
            registry.edit_location(aj_id, prompt_location(ask))
            again = _ask_int(
                ask, " - Editar un altre objecte (1)\n\n - Sortir de l'editor (2)\n\n ---> "
            )
            if again != 1:
                return
        elif choice == 3:
            return
        else:
            say(" Inserta un valor correcte: ")


def _add_objects(registry: ParkRegistry, aj_id: int, ask: Ask) -> int:
    """Keep adding objects to a park while the user answers yes; return how many."""
    added = 0
    while _ask_int(ask, " Vols afegir un nou objecte: \n\n - Si (1)\n\n - No (2)\n\n ---> ") == 1:
        registry.add_object(aj_id, prompt_play_object(ask))
        added += 1
    return added


def add_session(registry: ParkRegistry, ask: Ask, say: Say) -> None:
    """Add new parks or new objects to existing parks until the user leaves."""
    while True:
        choice = _ask_int(
            ask,
            " - Afegir un nou parc (1)\n\n - Afegir un nou objecte a un parc existent (2)\n\n"
            " - Sortir de l'editor (3)\n\n ---> ",
        )
        if choice == 1:
            say(" Inserta la localitzacio del parc que vols afegir: ")
            location = prompt_location(ask)
            if location.aj_id in registry:
                say(f" Ja existeix un parc amb l'ID {location.aj_id}. ")
                continue
            registry.add_park(Park(location=location))
            if _add_objects(registry, location.aj_id, ask) == 0:
                say(_NO_OBJECTS)
        elif choice == 2:
            while True:
                aj_id = _ask_int(
                    ask, " Inserta el ID de l'area de Joc que vols afegir un objecte: "
                )
                if aj_id is not None and aj_id in registry:
                    break
                say(_NOT_FOUND)
            _add_objects(registry, aj_id, ask)
        else:
            return


def delete_session(registry: ParkRegistry, ask: Ask, say: Say) -> None:
    """Delete whole parks or single objects until the user leaves."""
    while True:
        aj_id = _ask_int(ask, " Inserta el ID de l'area de Joc que vols eliminar: ")
        if aj_id is None or aj_id not in registry:
            say(_NOT_FOUND)
            return
        choice = _ask_int(
            ask,
            " - Eliminar el parc (1) \n\n - Eliminar un objecte (2) \n\n"
            " - Sortir de l'editor (3)\n\n",
        )
        if choice == 1:
            registry.delete_park(aj_id)
            continue
        if choice == 2:
            while True:
                park = registry.get(aj_id)
                number = _ask_int(
                    ask,
                    f" Pots eliminar {len(park)}, inserta el seguent objecte que vulguis "
                    "eliminar, o surt de l'editor d'objectes insertan cualsevol tecla: "
                    "\n\n ---> ",
                )
                if number is None or not 1 <= number <= len(park):
                    return
                _show(say, park.objects[number - 1].render())
                say(" As escollit aquest objecte. ")
                registry.delete_object(aj_id, number - 1)
                again = _ask_int(
                    ask, " - Eliminar un altre objecte (1)\n\n - Sortir de l'editor (2) \n\n"
                )
                if again == 2:
                    return
        return


def run_menu(registry: ParkRegistry, ask: Ask, say: Say) -> None:
    """Run the main menu until input runs out."""
    while True:
        try:
            answer = ask(_MAIN_MENU).strip()
        except EOFError:
            return
        choice = answer[:1]
        try:
            if choice == "b":
                add_session(registry, ask, say)
            elif choice == "a":
                edit_session(registry, ask, say)
            elif choice == "c":
                delete_session(registry, ask, say)
        except EOFError:
            return
        except ValueError as exc:
            say(f" {exc}")


def main(argv: list[str] | None = None) -> int:
    """Load the data file and start the interactive menu."""
    parser = argparse.ArgumentParser(description="Browse and edit the play-area records.")
    parser.add_argument("data", nargs="?", default=DEFAULT_DATA_FILE, help="data file to load")
    args = parser.parse_args(argv)
    try:
        registry = load_registry(args.data)
    except (OSError, RecordError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    run_menu(registry, input, print)
    return 0


if __name__ == "__main__":
    sys.exit(main())