from collections.abc import Callable
from typing import Literal

FlavourName = Literal["auto", "posix", "windows"]

CwdProvider = Callable[[], str]

CwdSource = str | CwdProvider | None
