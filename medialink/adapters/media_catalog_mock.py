"""Offline multimedia service used when no server transport is wired.

Answers request lines with the same semantics as the multimedia server:
``search <name>`` returns the description of a media item or group (empty
text when nothing matches) and any other action plays the named media and
returns empty text. Playback is only logged; no external player is started.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from medialink.domain.errors import CatalogError, CatalogFormatError, NamingError
from medialink.domain.media import Film, Group, Media, Photo, Video
from medialink.domain.ports import ServicePort
from medialink.domain.protocol import parse_request

_log = logging.getLogger(__name__)


@dataclass
class MediaCatalogMock(ServicePort):
    """In-memory media catalog answering protocol request lines."""

    def __post_init__(self) -> None:
        self._media: Dict[str, Media] = {}
        self._groups: Dict[str, Group] = {}
        self.played: List[str] = []
        self.closed = False

    # ---------- ServicePort ----------

    def send(self, request_line: str) -> str:
        action, name = parse_request(request_line)
        _log.debug("request: %s", request_line)
        if action == "search":
            try:
                response = self.search(name)
            except NamingError as exc:
                _log.warning("%s", exc)
                response = ""
        else:
            self.play(name)
            response = ""
        _log.debug("response: %s", response)
        return response

    def close(self) -> None:
        self.closed = True

    # ---------- Catalog operations ----------

    def add_photo(
        self, name: str, filepath: str = "", latitude: float = 0, longitude: float = 0
    ) -> Photo:
        return self._add_media(Photo(name, filepath, float(latitude), float(longitude)))

    def add_video(self, name: str, filepath: str = "", duration: int = 0) -> Video:
        return self._add_media(Video(name, filepath, int(duration)))

    def add_film(
        self, name: str, filepath: str = "", duration: int = 0, chapters: Sequence[int] = ()
    ) -> Film:
        return self._add_media(Film(name, filepath, int(duration), tuple(chapters)))

    def add_group(self, name: str = "DefaultGroup") -> Group:
        if name in self._groups:
            raise NamingError("Group name already exists!")
        group = Group(name)
        self._groups[name] = group
        return group

    def search(self, name: str) -> str:
        """Return the description of a media item or group named ``name``."""
        media = self._media.get(name)
        if media is not None:
            return media.describe()
        group = self._groups.get(name)
        if group is not None:
            return group.describe()
        raise NamingError("No group or multimedia with this name exists!")

    def play(self, name: str) -> bool:
        media = self._media.get(name)
        if media is None:
            _log.info("No multimedia found with the name: %s", name)
            return False
        _log.info("Playing %s (%s)", name, media.play_command())
        self.played.append(name)
        return True

    def remove(self, name: str) -> None:
        if self._media.pop(name, None) is not None:
            _log.info("Multimedia object with name %s deleted.", name)
            return
        if self._groups.pop(name, None) is not None:
            _log.info("Group with name %s deleted.", name)
            return
        raise NamingError(f"No multimedia or group found with the name {name}")

    def media_names(self) -> List[str]:
        return sorted(self._media)

    def _add_media(self, media: Media):
        if media.name in self._media:
            raise NamingError(f"{media.kind} name already exists!")
        self._media[media.name] = media
        return media

    # ---------- Loading ----------

    @classmethod
    def seeded(cls) -> "MediaCatalogMock":
        """Catalog with the sample items the multimedia server starts with."""
        catalog = cls()
        photo = catalog.add_photo(
            "test-photo", "/home/vivian_withana/paradigm/TP1/test-photo.JPG", 10, 10
        )
        video = catalog.add_video(
            "test-video", "/home/vivian_withana/paradigm/TP1/test-video.mp4", 10
        )
        group = catalog.add_group("My favorites")
        group.add(photo)
        group.add(video)
        catalog.add_film("ToyStory", "./ToyStory", 20, (10, 20, 30, 40, 50))
        return catalog

    def load_lines(self, lines: Iterable[str]) -> int:
        """Add media described in the catalog text format.

        Supported lines::

            Photo <name> <path> <latitude> <longitude>
            Video <name> <path> <duration>
            Film <name> <path> <duration> <n> <c1> ... <cn>

        Unknown class names are logged and skipped; blank lines are ignored.

        Returns:
            Number of media items added.

        Raises:
            CatalogFormatError: If a known line is malformed or a film has
                no chapters.
            NamingError: If a name is already present.
        """
        added = 0
        for line_no, raw in enumerate(lines, start=1):
            tokens = raw.split()
            if not tokens:
                continue
            kind, args = tokens[0], tokens[1:]
            try:
                if kind == "Photo":
                    name, path, lat, lon = args[:4]
                    self.add_photo(name, path, float(lat), float(lon))
                elif kind == "Video":
                    name, path, duration = args[:3]
                    self.add_video(name, path, int(duration))
                elif kind == "Film":
                    name, path, duration, count = args[:4]
                    n_chapters = int(count)
                    if n_chapters == 0:
                        raise CatalogFormatError("Chapters cannot be empty!", line_no=line_no)
                    chapters = [int(c) for c in args[4 : 4 + n_chapters]]
                    if len(chapters) != n_chapters:
                        raise CatalogFormatError(
                            f"Expected {n_chapters} chapters, got {len(chapters)}",
                            line_no=line_no,
                        )
                    self.add_film(name, path, int(duration), chapters)
                else:
                    _log.warning("Class type %s doesn't exist (line %d)", kind, line_no)
                    continue
            except ValueError as exc:
                raise CatalogFormatError(f"Line {line_no}: {exc}", line_no=line_no) from exc
            added += 1
        return added

    @classmethod
    def from_file(cls, path: str, *, base: Optional["MediaCatalogMock"] = None) -> "MediaCatalogMock":
        """Load ``path`` into ``base`` (or a new catalog).

        Loading stops at the first bad line; items read before it are kept
        and the error is logged, so a broken file never prevents start-up.
        """
        catalog = base if base is not None else cls()
        if not os.path.exists(path):
            _log.error("Error opening file: %s", path)
            return catalog
        before = len(catalog._media)
        try:
            with open(path, "r", encoding="utf-8") as f:
                catalog.load_lines(f)
        except (CatalogError, OSError, UnicodeDecodeError) as exc:
            _log.error("Stopped loading %s: %s", path, exc)
        _log.info("Loaded %d media items from %s", len(catalog._media) - before, path)
        return catalog

    def save(self, path: str) -> int:
        """Append every media item to ``path`` in the catalog text format.

        Groups are not written; the file format has no line type for them.

        Returns:
            Number of lines written.
        """
        items = [self._media[name] for name in self.media_names()]
        with open(path, "a", encoding="utf-8") as f:
            for media in items:
                f.write(media.to_line() + "\n")
                _log.debug("Writing %s %s", media.kind, media.name)
        return len(items)
