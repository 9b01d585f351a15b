# runtime.py
from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
from importlib.util import find_spec
from typing import TYPE_CHECKING, Any

from colorama import Fore, Style

if TYPE_CHECKING:
    from regnum.config import Settings


@dataclass
class Runtime:
    profile_name: str = "default"
    settings: dict[str, Any] = field(default_factory=dict)
    debug: bool = False  # controls verbosity / tracebacks

    def apply(self, settings: Settings | dict[str, Any]) -> None:
        """Install a loaded profile (or a bare settings dict) as the active one."""
        if isinstance(settings, dict):
            self.profile_name = "custom"
            self.settings = dict(settings)
        else:
            self.profile_name = settings.name
            self.settings = dict(settings.as_dict())

        dbg = self.get("BEHAVIOUR.DEBUG", None)
        if isinstance(dbg, bool):
            self.debug = dbg

    def get(self, key: str, default: Any = None) -> Any:
        """Dotted lookup into the nested settings, e.g. 'ALGORITHMS.LOG_TOLERANCE'."""
        cur: Any = self.settings
        for part in key.split("."):
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return cur


# --- Context management ---

_current_runtime: ContextVar[Runtime | None] = ContextVar("regnum_runtime", default=None)


def current() -> Runtime:
    rt = _current_runtime.get()
    if rt is None:
        rt = Runtime()
        _current_runtime.set(rt)
    return rt


def reset() -> Runtime:
    """Install a fresh Runtime (no profile applied) and return it."""
    rt = Runtime()
    _current_runtime.set(rt)
    return rt


def APPLY(settings: Settings | dict[str, Any]) -> None:
    current().apply(settings)


def CFG(key: str, default: Any = None) -> Any:
    return current().get(key, default)


# ---- --verify prerequisites --------------------------------------------------

VERIFY_MODULES = ("sympy", "gmpy2")


def ensure_runtime_deps(strict: bool = True, modules: tuple[str, ...] = VERIFY_MODULES) -> bool:
    """
    True when every module behind --verify can be imported. Otherwise name the
    missing ones and return False (or True when strict is off).
    """
    missing = [name for name in modules if find_spec(name) is None]
    if not missing:
        return True

    print(f"{Fore.RED}{Style.BRIGHT}--verify needs:{Style.RESET_ALL} {', '.join(missing)}")
    print(f"Install with: {Fore.YELLOW}pip install {' '.join(missing)}{Style.RESET_ALL}")
    return not strict
