"""Media entities served by the offline catalog.

Each entity knows how to describe itself as the text block returned for a
``search`` request and how to round-trip through the catalog file format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


def _fmt_number(value: float) -> str:
    """Render a number like a default C++ ostream (six significant digits)."""
    return f"{float(value):g}"


@dataclass
class Media:
    name: str
    filepath: str = ""

    kind = "Media"
    player = ""

    def describe(self) -> str:
        return f"Name: {self.name}, filepath: {self.filepath}\n"

    def to_line(self) -> str:
        return f"{self.kind} {self.name} {self.filepath}"

    def play_command(self) -> str:
        """Shell command the service would launch for this media."""
        return f"{self.player} {self.filepath} &".strip()


@dataclass
class Photo(Media):
    latitude: float = 0.0
    longitude: float = 0.0

    kind = "Photo"
    player = "imagej"

    def describe(self) -> str:
        return (
            f"Name: {self.name}, filepath: {self.filepath}, "
            f"Latitude: {_fmt_number(self.latitude)}, "
            f"Longitude: {_fmt_number(self.longitude)}\n"
        )

    def to_line(self) -> str:
        return (
            f"Photo {self.name} {self.filepath} "
            f"{_fmt_number(self.latitude)} {_fmt_number(self.longitude)}"
        )


@dataclass
class Video(Media):
    duration: int = 0

    kind = "Video"
    player = "mpv"

    def describe(self) -> str:
        return f"Name: {self.name}, filepath: {self.filepath}, Duration: {self.duration}\n"

    def to_line(self) -> str:
        return f"Video {self.name} {self.filepath} {self.duration}"


@dataclass
class Film(Video):
    chapters: Tuple[int, ...] = ()

    kind = "Film"

    def __post_init__(self) -> None:
        # Chapters are copied so callers cannot mutate the film afterwards.
        self.chapters = tuple(int(c) for c in self.chapters)
        if not self.chapters:
            raise ValueError("Chapters cannot be empty!")

    def describe(self) -> str:
        return "".join(
            f"The duration for chapter {index} of the film is {length}\n"
            for index, length in enumerate(self.chapters)
        )

    def to_line(self) -> str:
        parts = [f"Film {self.name} {self.filepath} {self.duration} {len(self.chapters)}"]
        parts.extend(str(c) for c in self.chapters)
        return " ".join(parts)


@dataclass
class Group:
    """Named, ordered collection of media sharing ownership with the catalog."""

    name: str
    members: List[Media] = field(default_factory=list)

    def add(self, media: Media) -> None:
        self.members.append(media)

    def describe(self) -> str:
        lines = [f"Group Name: {self.name}\n"]
        lines.extend(member.describe() for member in self.members)
        return "".join(lines)


__all__ = ["Media", "Photo", "Video", "Film", "Group"]
