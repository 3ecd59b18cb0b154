"""Play-area objects and locations of the park records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

_RULE = "-" * 31
_BAND = "º" * 31

Ask = Callable[[str], str]


def _format_number(value: float) -> str:
    """Format a float the way a default stream does (six significant digits)."""
    return f"{value:g}"


def split_coordinate(text: str) -> list[str]:
    """Split a longitude or latitude string on its dots."""
    return text.split(".")


@dataclass
class PlayObject:
    """One object (swing, slide, ...) inside a play area."""

    aj_id: int = 0
    aj_m2: float = 0.0
    aj_age_id: int = 0
    aj_age: str = ""
    code: str = ""
    kind: str = ""

    def render(self) -> str:
        """Return the multi-line listing of this object."""
        lines = [
            f" {_RULE}",
            f" Area de Jocs ID: {self.aj_id}",
            f" Area de Jocs M2: {_format_number(self.aj_m2)}",
            f" Area de Jocs Edat ID: {self.aj_age_id}",
            f" Area de Jocs Edat: {self.aj_age}",
            f" Codi: {self.code}",
            f" Tipus: {self.kind}",
        ]
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()


@dataclass
class Location:
    """Where a play area is: street, neighbourhood, district and coordinates."""

    aj_id: int = 0
    street_code: int = 0
    district_code: int = 0
    neighbourhood_code: int = 0
    street_name: str = ""
    district_name: str = ""
    neighbourhood_name: str = ""
    street_type: str = ""
    postal_number: int = 0
    longitude: str = ""
    latitude: str = ""

    def render(self) -> str:
        """Return the multi-line listing of this location."""
        lines = [
            f" {_RULE}",
            f" {_BAND}",
            f" {_RULE}",
            f" Id de l'area de joc :{self.aj_id}",
            f" Codi de la via :{self.street_code}",
            f" Codi del districte :{self.district_code}",
            f" Codi del barri :{self.neighbourhood_code}",
            f" nom de la via: {self.street_name}",
            f" nom del barri: {self.neighbourhood_name}",
            f" nom del districte: {self.district_name}",
            f" tipus de via: {self.street_type}",
            f" numero postal: {self.postal_number}",
            f" Latitud: {self.latitude}",
            f" Longitud: {self.longitude}",
        ]
        return "\n".join(lines) + "\n"

    def coordinate_parts(self) -> tuple[list[str], list[str]]:
        """Return the dot-separated parts of longitude and latitude."""
        return split_coordinate(self.longitude), split_coordinate(self.latitude)

    def __str__(self) -> str:
        return self.render()


class ObjectCatalog:
    """Play objects keyed by their code; a code may be added only once."""

    def __init__(self) -> None:
        self._objects: dict[str, PlayObject] = {}

    def add(self, obj: PlayObject) -> bool:
        """Add an object; return False if its code is already present."""
        if obj.code in self._objects:
            return False
        self._objects[obj.code] = obj
        return True

    def __contains__(self, code: object) -> bool:
        return code in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[PlayObject]:
        return iter(self._objects.values())


def _read_token(ask: Ask, prompt: str) -> str:
    answer = ask(prompt).strip()
    return answer.split()[0] if answer else ""


def _read_int(ask: Ask, prompt: str) -> int:
    token = _read_token(ask, prompt)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer for {prompt.strip()!r}, got {token!r}") from None


def _read_float(ask: Ask, prompt: str) -> float:
    token = _read_token(ask, prompt)
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"expected a number for {prompt.strip()!r}, got {token!r}") from None


def prompt_play_object(ask: Ask) -> PlayObject:
    """Build a PlayObject from answers to a series of prompts."""
    aj_id = _read_int(ask, " - Area de Jocs ID: ")
    aj_m2 = _read_float(ask, " - Area de Jocs M2: ")
    aj_age_id = _read_int(ask, " - Area de Jocs Edat ID: ")
    aj_age = _read_token(ask, " - Area de Jocs Edat: ")
    code = _read_token(ask, " - Codi: ")
    kind = _read_token(ask, " - Tipus: ")
    return PlayObject(aj_id, aj_m2, aj_age_id, aj_age, code, kind)


def prompt_location(ask: Ask) -> Location:
    """Build a Location from answers to a series of prompts."""
    aj_id = _read_int(ask, " - Id de l'area de joc: ")
    district_name = _read_token(ask, " - Nom del Districte: ")
    district_code = _read_int(ask, " - Codi del Districte: ")
    neighbourhood_name = _read_token(ask, " - Nom del Barri: ")
    neighbourhood_code = _read_int(ask, " - Codi del Barri: ")
    street_name = _read_token(ask, " - Nom de la Via: ")
    street_code = _read_int(ask, " - Codi de la Via: ")
    street_type = _read_token(ask, " - Tipus de Via: ")
    postal_number = _read_int(ask, " - Numero Postal: ")
    longitude = _read_token(ask, " - Longitud: ")
    latitude = _read_token(ask, " - Latitud: ")
    return Location(
        aj_id=aj_id,
        street_code=street_code,
        district_code=district_code,
        neighbourhood_code=neighbourhood_code,
        street_name=street_name,
        district_name=district_name,
        neighbourhood_name=neighbourhood_name,
        street_type=street_type,
        postal_number=postal_number,
        longitude=longitude,
        latitude=latitude,
    )