"""Loading park records from a data file and keeping them sorted by play-area id."""

from __future__ import annotations

import bisect
import dataclasses
import os
from dataclasses import dataclass
from itertools import groupby
from typing import Iterable, Iterator

from parcsbarna.models import Location, PlayObject
from parcsbarna.park import Park

_FIELD_COUNT = 20


class RecordError(ValueError):
    """Raised when the data file holds a malformed record."""


@dataclass
class Record:
    """One row of the data file: an object and the location of its play area."""

    location: Location
    obj: PlayObject


def _convert(kind: type, value: str, name: str, number: int):
    try:
        return kind(value)
    except ValueError:
        raise RecordError(f"record {number}: field {name!r} has invalid value {value!r}") from None


def _make_record(tokens: list[str], number: int) -> Record:
    (
        code, aj_id, kind, aj_m2, aj_age_id, aj_age,
        street_code, street_type, street_name, postal_number,
        district_code, district_name, neighbourhood_code, neighbourhood_name,
        _x_etrs89, _y_etrs89, longitude, latitude, green_code, _green_name,
    ) = tokens
    aj_id_value = _convert(int, aj_id, "AJ_Id", number)
    obj = PlayObject(
        aj_id=aj_id_value,
        aj_m2=_convert(float, aj_m2, "AJ_M2", number),
        aj_age_id=_convert(int, aj_age_id, "AJ_Edat_Id", number),
        aj_age=aj_age,
        code=code,
        kind=kind,
    )
    location = Location(
        aj_id=aj_id_value,
        street_code=_convert(int, street_code, "Codi_V", number),
        district_code=_convert(int, district_code, "Codi_D", number),
        neighbourhood_code=_convert(int, neighbourhood_code, "Codi_B", number),
        street_name=street_name,
        district_name=district_name,
        neighbourhood_name=neighbourhood_name,
        street_type=street_type,
        postal_number=_convert(int, postal_number, "Num_P", number),
        longitude=longitude,
        latitude=latitude,
    )
    _convert(int, green_code, "SPVC", number)
    return Record(location=location, obj=obj)


def parse_records(lines: Iterable[str]) -> list[Record]:
    """Parse the data lines; the first line is a header and is skipped."""
    it = iter(lines)
    next(it, None)
    tokens = [token for line in it for token in line.split()]
    if len(tokens) % _FIELD_COUNT:
        raise RecordError(
            f"incomplete record: {len(tokens) % _FIELD_COUNT} trailing fields, "
            f"expected {_FIELD_COUNT} per record"
        )
    return [
        _make_record(tokens[start:start + _FIELD_COUNT], start // _FIELD_COUNT + 1)
        for start in range(0, len(tokens), _FIELD_COUNT)
    ]


def build_parks(records: Iterable[Record]) -> list[Park]:
    """Group consecutive records sharing a play-area id into parks, in file order."""
    parks = []
    for _, group in groupby(records, key=lambda record: record.obj.aj_id):
        rows = list(group)
        parks.append(
            Park(
                location=dataclasses.replace(rows[0].location),
                objects=[row.obj for row in rows],
            )
        )
    return parks


class ParkRegistry:
    """Parks kept sorted by play-area id."""

    def __init__(self, parks: Iterable[Park] = ()) -> None:
        self._parks: list[Park] = sorted(parks, key=lambda park: park.aj_id)

    @property
    def parks(self) -> list[Park]:
        """The parks in id order."""
        return list(self._parks)

    def __len__(self) -> int:
        return len(self._parks)

    def __iter__(self) -> Iterator[Park]:
        return iter(self._parks)

    def __contains__(self, aj_id: object) -> bool:
        try:
            self.find_index(aj_id)  # type: ignore[arg-type]
        except KeyError:
            return False
        return True

    def _ids(self) -> list[int]:
        return [park.aj_id for park in self._parks]

    def find_index(self, aj_id: int) -> int:
        """Return the position of the park with this id by binary search."""
        ids = self._ids()
        position = bisect.bisect_left(ids, aj_id)
        if position < len(ids) and ids[position] == aj_id:
            return position
        raise KeyError(aj_id)

    def get(self, aj_id: int) -> Park:
        """Return the park with this id."""
        return self._parks[self.find_index(aj_id)]

    def add_park(self, park: Park) -> None:
        """Insert a new park; its id must not be present yet."""
        if park.aj_id in self:
            raise ValueError(f"a park with id {park.aj_id} already exists")
        position = bisect.bisect_left(self._ids(), park.aj_id)
        self._parks.insert(position, park)

    def add_object(self, aj_id: int, obj: PlayObject) -> PlayObject:
        """Add an object to an existing park; the object takes the park's id."""
        park = self.get(aj_id)
        stored = dataclasses.replace(obj, aj_id=aj_id)
        park.add_object(stored)
        return stored

    def edit_location(self, aj_id: int, location: Location) -> None:
        """Replace a park's location, keeping the park's id."""
        self.get(aj_id).location = dataclasses.replace(location, aj_id=aj_id)

    def edit_object(self, aj_id: int, index: int, obj: PlayObject) -> None:
        """Replace a park's object at a zero-based position, keeping the park's id."""
        self.get(aj_id).replace_object(index, dataclasses.replace(obj, aj_id=aj_id))

    def delete_park(self, aj_id: int) -> Park:
        """Remove and return the park with this id."""
        return self._parks.pop(self.find_index(aj_id))

    def delete_object(self, aj_id: int, index: int) -> PlayObject:
        """Remove and return a park's object at a zero-based position."""
        return self.get(aj_id).remove_object(index)

    def render(self) -> str:
        """Return the listing of every park in id order."""
        return "".join(park.render() for park in self._parks)

    def __str__(self) -> str:
        return self.render()


def load_registry(path: str | os.PathLike[str]) -> ParkRegistry:
    """Read a data file and return its parks as a registry."""
    with open(path, encoding="utf-8") as handle:
        return ParkRegistry(build_parks(parse_records(handle)))