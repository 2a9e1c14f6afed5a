from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Prefix:
    """Platform anchor that is not a separator (drive letter, UNC share).

    The payload is opaque: it is carried through unchanged and never parsed.
    """

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Root:
    """The separator that anchors an absolute path."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Current:
    def __str__(self) -> str:
        return "."


@dataclass(frozen=True, slots=True)
class Parent:
    def __str__(self) -> str:
        return ".."


@dataclass(frozen=True, slots=True)
class Segment:
    name: str

    def __post_init__(self) -> None:
        if self.name in ("", ".", ".."):
            raise ValueError(
                f"Invalid segment name: {self.name!r}. "
                "Use Current() or Parent() for '.' and '..'."
            )

    def __str__(self) -> str:
        return self.name


PathComponent = Prefix | Root | Current | Parent | Segment

ANCHOR_TYPES = (Prefix, Root)
