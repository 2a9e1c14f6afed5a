"""Platform flavours: split a path string into components and join them back.

A flavour owns every separator and drive rule, so the collapser never has to
look at a separator character.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from abc import ABC, abstractmethod

from ._components import ANCHOR_TYPES, Current, Parent, PathComponent, Prefix, Root, Segment


class Flavour(ABC):
    """Split rules and join rules for one platform's path syntax."""

    name: str = ""
    sep: str = "/"
    altsep: str | None = None

    @abstractmethod
    def is_absolute(self, path: str) -> bool: ...

    @abstractmethod
    def split(self, path: str) -> tuple[list[PathComponent], bool]: ...

    @abstractmethod
    def join_onto(self, base: str, path: str) -> str: ...

    def join(self, components: list[PathComponent]) -> str:
        anchor = ""
        names: list[str] = []
        for component in components:
            if isinstance(component, ANCHOR_TYPES):
                anchor += component.value
            else:
                names.append(str(component))
        if not anchor and not names:
            return "."
        return anchor + self.sep.join(names)

    def _split_names(self, rest: str) -> list[PathComponent]:
        if self.altsep:
            rest = rest.replace(self.altsep, self.sep)
        components: list[PathComponent] = []
        for part in rest.split(self.sep):
            if not part:
                continue
            if part == ".":
                components.append(Current())
            elif part == "..":
                components.append(Parent())
            else:
                components.append(Segment(part))
        return components

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PosixFlavour(Flavour):
    name = "posix"
    sep = "/"
    altsep = None

    def is_absolute(self, path: str) -> bool:
        return path.startswith("/")

    def split(self, path: str) -> tuple[list[PathComponent], bool]:
        components: list[PathComponent] = []
        is_absolute = self.is_absolute(path)
        if is_absolute:
            # "//a" and "///a" both anchor at a single root
            components.append(Root(self.sep))
        components.extend(self._split_names(path))
        return components, is_absolute

    def join_onto(self, base: str, path: str) -> str:
        return posixpath.join(base, path)


class WindowsFlavour(Flavour):
    name = "windows"
    sep = "\\"
    altsep = "/"

    def _split_unc(self, path: str) -> tuple[str, str]:
        # path is known to start with exactly two separators
        norm = path.replace(self.altsep, self.sep)
        server_end = norm.find(self.sep, 2)
        if server_end == -1:
            return path, ""
        share_end = norm.find(self.sep, server_end + 1)
        if share_end == -1:
            share_end = len(norm)
        if norm[server_end + 1:share_end] in ("", ".", ".."):
            # "\\srv\", "\\srv\..\x": no share, the rest is an ordinary path
            return path[:server_end], path[server_end:]
        return path[:share_end], path[share_end:]

    def _split_anchor(self, path: str) -> tuple[str, bool, bool, str]:
        """Return ``(drive, is_unc, has_root, rest)``."""
        seps = (self.sep, self.altsep)
        if (
            path[:1] in seps
            and path[1:2] in seps
            and path[2:3] not in seps
            and path[2:].replace(self.altsep, self.sep).split(self.sep, 1)[0] != ".."
        ):
            drive, rest = self._split_unc(path)
            is_unc = True
        elif path[:1] in seps:
            drive, rest = "", path
            is_unc = False
        else:
            # only a drive letter can be split off here
            drive, rest = ntpath.splitdrive(path)
            is_unc = False
        return drive, is_unc, rest.startswith(seps), rest

    def is_absolute(self, path: str) -> bool:
        drive, is_unc, has_root, _ = self._split_anchor(path)
        return is_unc or (bool(drive) and has_root)

    def split(self, path: str) -> tuple[list[PathComponent], bool]:
        drive, is_unc, has_root, rest = self._split_anchor(path)
        components: list[PathComponent] = []
        if drive:
            components.append(Prefix(drive))
        if has_root:
            components.append(Root(self.sep))
        components.extend(self._split_names(rest))
        return components, is_unc or (bool(drive) and has_root)

    def join_onto(self, base: str, path: str) -> str:
        drive, is_unc, has_root, rest = self._split_anchor(path)
        if is_unc or (drive and has_root):
            return path
        base_drive = self._split_anchor(base)[0]
        if drive and drive.lower() != base_drive.lower():
            # "D:x" onto a C: base keeps its own drive and stays drive-relative
            return path
        if has_root:
            return base_drive + rest
        return base + self.sep + rest


_FLAVOURS: dict[str, Flavour] = {
    "posix": PosixFlavour(),
    "windows": WindowsFlavour(),
}


def get_flavour(name: str = "auto") -> Flavour:
    if name == "auto":
        name = "windows" if os.name == "nt" else "posix"
    try:
        return _FLAVOURS[name]
    except KeyError:
        raise ValueError(
            f"Invalid flavour value: {name!r}. "
            "Expected 'auto', 'posix', or 'windows'."
        ) from None
