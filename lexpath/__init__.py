from ._collapse import collapse
from ._components import Current, Parent, PathComponent, Prefix, Root, Segment
from ._exceptions import LexPathEnvironmentUnavailableError, LexPathInvalidInputError
from ._flavour import Flavour, PosixFlavour, WindowsFlavour, get_flavour
from ._normalizer import PathNormalizer, normalize_path

__all__ = [
    "normalize_path",
    "PathNormalizer",
    "collapse",
    "PathComponent",
    "Prefix",
    "Root",
    "Current",
    "Parent",
    "Segment",
    "Flavour",
    "PosixFlavour",
    "WindowsFlavour",
    "get_flavour",
    "LexPathInvalidInputError",
    "LexPathEnvironmentUnavailableError",
]
__version__ = "0.1.0"
