from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("regnum")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .algorithms import (
    get_regular_compact,
    get_regular_divide_conquer,
    get_regular_factor,
    get_regular_fast_geometric,
    get_regular_log_set,
    get_regular_set,
)
from .config import has_profile, load_settings
from .registry import discover
from .runtime import APPLY, CFG
from .utility import coef2log2, strip_smooth

__all__ = [
    "APPLY",
    "CFG",
    "__version__",
    "coef2log2",
    "discover",
    "get_regular_compact",
    "get_regular_divide_conquer",
    "get_regular_factor",
    "get_regular_fast_geometric",
    "get_regular_log_set",
    "get_regular_set",
    "has_profile",
    "load_settings",
    "strip_smooth",
]
