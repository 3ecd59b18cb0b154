# parcsbarna

A small console tool for a catalogue of playground areas. Each area has a
location (street, district, neighbourhood, postal number, longitude and
latitude) and a list of play objects (code, type, surface in m², age range).

## Installing

```
pip install .
```

## Running

```
parcsbarna [DATA_FILE]
```

The command reads the data file (`DATA.txt` in the current directory unless
another path is given) and shows a menu:

- **a**: edit an area's location or one of its play objects
- **b**: add a new area, or add objects to an existing area
- **c**: delete an area or one of its objects

Areas are looked up by their play-area identifier. The menu keeps running
until input ends (for example Ctrl-D). If an answer to a prompt cannot be read
as the number it asks for, a message is shown and the main menu comes back.

If the data file cannot be opened or holds a malformed record, the command
prints an error and exits with status 1.

## Data file

The first line is a header and is skipped. The rest is read as
whitespace-separated fields, twenty per record, in this order:

object code, area id, object type, area m², age id, age range, street code,
street type, street name, postal number, district code, district name,
neighbourhood code, neighbourhood name, x (ETRS89), y (ETRS89), longitude,
latitude, green-space code, green-space name.

The area id, age id, street code, postal number, district code,
neighbourhood code and green-space code must be integers, and the area m² a
number. Consecutive records with the same area id form one area; its location
is taken from the first of them.

## Using it from Python

```python
from parcsbarna.registry import load_registry

registry = load_registry("DATA.txt")
for park in registry:
    print(park.aj_id, len(park))
print(registry.render())
```

- `parcsbarna.registry`: `load_registry(path)`, `parse_records(lines)`,
  `build_parks(records)`, `RecordError`, and `ParkRegistry`, which keeps parks
  sorted by id and provides `find_index`, `get`, `add_park`, `add_object`,
  `edit_location`, `edit_object`, `delete_park`, `delete_object` and
  `render`. Looking up an unknown id raises `KeyError`; adding a park whose id
  already exists raises `ValueError`.
- `parcsbarna.park`: `Park`, a location with its list of objects
  (`add_object`, `replace_object`, `remove_object`, `clear`,
  `coordinate_parts`, `render`). Object positions are zero-based and an
  out-of-range position raises `IndexError`.
- `parcsbarna.models`: the `Location` and `PlayObject` dataclasses,
  `ObjectCatalog` (objects keyed by code, each code added once),
  `split_coordinate`, and `prompt_location` / `prompt_play_object`, which build
  a model from the answers of any `ask(prompt) -> str` callable.
- `parcsbarna.cli`: `run_menu`, `edit_session`, `add_session` and
  `delete_session` take a registry plus `ask` and `say` callables, so the menu
  can be driven without a terminal; `main` is the command above.

## What it does not do

Changes made through the menu are kept in memory only. Nothing is written back
to the data file, and there is no command to save or export the catalogue.

## Tests

```
pip install .[test]
pytest
```