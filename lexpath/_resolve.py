from __future__ import annotations

import logging

from ._exceptions import LexPathEnvironmentUnavailableError, LexPathInvalidInputError
from ._flavour import Flavour
from ._typing import CwdProvider

logger = logging.getLogger(__name__)

# Unicode White_Space. str.strip() would also drop the \x1c-\x1f separators,
# which are legal file name characters.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def trim(raw_path: str) -> str:
    return raw_path.strip(WHITESPACE)


def resolve(raw_path: str, flavour: Flavour, cwd: CwdProvider) -> str:
    """Trim *raw_path* and make it absolute against the working directory.

    *cwd* is called at most once, and only when the trimmed path is relative.
    """
    trimmed = trim(raw_path)
    if not trimmed:
        raise LexPathInvalidInputError(raw_path)
    if flavour.is_absolute(trimmed):
        return trimmed

    try:
        base = cwd()
    except OSError as exc:
        logger.warning("Cannot read working directory for %r: %s", trimmed, exc)
        raise LexPathEnvironmentUnavailableError(raw_path, str(exc)) from exc

    joined = flavour.join_onto(base, trimmed)
    logger.debug("Joined relative path %r onto %r -> %r", trimmed, base, joined)
    return joined
