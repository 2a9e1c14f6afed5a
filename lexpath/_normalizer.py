from __future__ import annotations

import logging
import os

from ._collapse import collapse
from ._components import PathComponent
from ._flavour import Flavour, get_flavour
from ._resolve import resolve, trim
from ._typing import CwdProvider, CwdSource, FlavourName

logger = logging.getLogger(__name__)


class PathNormalizer:
    """Turns raw path strings into canonical absolute paths, lexically.

    ``flavour`` selects the separator and drive rules: ``"auto"`` follows the
    running platform, ``"posix"`` and ``"windows"`` force one.  ``cwd`` is the
    directory relative paths are resolved against: ``None`` reads
    :func:`os.getcwd` on every call that needs it, a string pins it, and a
    callable is invoked once per call that needs it.

    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(self, flavour: FlavourName = "auto", cwd: CwdSource = None) -> None:
        self._flavour: Flavour = get_flavour(flavour)
        self._cwd: CwdProvider = self._make_cwd_provider(cwd)

    def _make_cwd_provider(self, cwd: CwdSource) -> CwdProvider:
        if cwd is None:
            return os.getcwd
        if isinstance(cwd, str):
            if not self._flavour.is_absolute(cwd):
                raise ValueError(
                    f"Invalid cwd value: {cwd!r}. "
                    f"Expected an absolute {self._flavour.name} path."
                )
            return lambda: cwd
        if callable(cwd):
            return cwd
        raise TypeError(
            f"cwd must be a string, a callable or None, not {type(cwd).__name__}"
        )

    @property
    def flavour(self) -> Flavour:
        return self._flavour

    def normalize_components(self, raw_path: str) -> list[PathComponent]:
        resolved = resolve(raw_path, self._flavour, self._cwd)
        components, is_absolute = self._flavour.split(resolved)
        if not is_absolute:
            logger.debug("Resolved path %r is still relative", resolved)
        return collapse(components, is_absolute)

    def normalize(self, raw_path: str) -> str:
        """Return the canonical absolute form of *raw_path*.

        Raises :class:`LexPathInvalidInputError` for an empty or blank path
        and :class:`LexPathEnvironmentUnavailableError` when a relative path
        needs the working directory and it cannot be read.
        """
        normalized = self._flavour.join(self.normalize_components(raw_path))
        logger.debug("Normalized %r -> %r", raw_path, normalized)
        return normalized

    def collapse(self, path: str) -> str:
        """Collapse *path* lexically without resolving it.

        Relative input stays relative.  Never raises.
        """
        components, is_absolute = self._flavour.split(trim(path))
        return self._flavour.join(collapse(components, is_absolute))

    def __repr__(self) -> str:
        return f"PathNormalizer(flavour={self._flavour.name!r})"


def normalize_path(raw_path: str) -> str:
    """Normalize *raw_path* for the running platform and process directory."""
    return PathNormalizer().normalize(raw_path)
