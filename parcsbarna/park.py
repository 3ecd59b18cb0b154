"""A park: one play-area location together with its play objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from parcsbarna.models import Location, PlayObject


@dataclass
class Park:
    """A play area's location and the objects found in it."""

    location: Location = field(default_factory=Location)
    objects: list[PlayObject] = field(default_factory=list)

    @property
    def aj_id(self) -> int:
        """The play-area id, taken from the location."""
        return self.location.aj_id

    def add_object(self, obj: PlayObject) -> None:
        """Append an object to the park."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove every object from the park."""
        self.objects.clear()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.objects):
            raise IndexError(
                f"object index {index} out of range for park {self.aj_id} "
                f"with {len(self.objects)} objects"
            )

    def replace_object(self, index: int, obj: PlayObject) -> None:
        """Replace the object at a zero-based position."""
        self._check_index(index)
        self.objects[index] = obj

    def remove_object(self, index: int) -> PlayObject:
        """Remove and return the object at a zero-based position."""
        self._check_index(index)
        return self.objects.pop(index)

    def coordinate_parts(self) -> tuple[list[str], list[str]]:
        """Return the dot-separated parts of the location's longitude and latitude."""
        return self.location.coordinate_parts()

    def render(self) -> str:
        """Return the location listing followed by each object's listing."""
        return self.location.render() + "".join(obj.render() for obj in self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __lt__(self, other: Park) -> bool:
        return self.aj_id < other.aj_id

    def __str__(self) -> str:
        return self.render()