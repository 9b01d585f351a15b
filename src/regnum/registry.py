# src/regnum/registry.py
from __future__ import annotations

import inspect
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass, field
from importlib import import_module
from importlib.resources import as_file
from importlib.resources import files as pkg_files
from pathlib import Path

KINDS = ("int", "log2", "triple")


# --------------------- Discovery → Index ----------------------------------


@dataclass
class Index:
    funcs: dict[int, Callable]                 # selector -> func
    labels: dict[int, str]                     # selector -> function name shown in the menu
    kinds: dict[int, str]                      # selector -> "int" | "log2" | "triple"
    descriptions: dict[int, str]               # selector -> short description
    limits: dict[int, int] = field(default_factory=dict)                # selector -> declared n limit
    limit_settings: dict[int, str] = field(default_factory=dict)        # selector -> profile key overriding it
    failed: list[tuple[str, str]] = field(default_factory=list)   # (module, error)

    @property
    def selectors(self) -> list[int]:
        return list(self.funcs)

    def get(self, selector: int) -> Callable | None:
        return self.funcs.get(selector)


def _is_algorithm(obj) -> bool:
    return callable(obj) and getattr(obj, "__is_algorithm__", False)


def _collect_from_module(mod) -> list[Callable[[int], object]]:
    out = []
    for _, o in inspect.getmembers(mod):
        if _is_algorithm(o):
            out.append(o)
    return out


# ---------- Decorator (only tags the function; no side effects) ----------


def algorithm(*, label: str, selector: int, kind: str, description: str = "",
              limit: int | None = None, limit_setting: str | None = None):
    if kind not in KINDS:
        raise ValueError(f"unknown result kind {kind!r}; expected one of {KINDS}")

    def deco(fn: Callable[[int], object]):
        fn.__is_algorithm__ = True
        fn.label = label
        fn.selector = int(selector)
        fn.kind = kind
        fn.description = description
        if limit is not None:
            fn.limit = int(limit)
        if limit_setting is not None:
            fn.limit_setting = limit_setting
        return fn
    return deco


def discover() -> Index:
    """Import every module in regnum.algorithms and index the tagged functions by selector."""
    found: dict[int, Callable] = {}
    failed: list[tuple[str, str]] = []

    pkg_dir = pkg_files("regnum") / "algorithms"
    with as_file(pkg_dir) as real:
        for file in sorted(Path(real).glob("*.py")):
            if file.name == "__init__.py":
                continue
            modname = f"regnum.algorithms.{file.stem}"
            try:
                mod = import_module(modname)
            except Exception as e:
                # Broken module: report, keep the rest of the suite usable
                failed.append((modname, f"{type(e).__name__}: {e}"))
                continue
            for fn in _collect_from_module(mod):
                if fn.selector in found and found[fn.selector] is not fn:
                    raise ValueError(
                        f"selector {fn.selector} used by both {found[fn.selector].label} and {fn.label}"
                    )
                found[fn.selector] = fn

    funcs: OrderedDict[int, Callable] = OrderedDict(sorted(found.items()))
    return Index(
        funcs=funcs,
        labels={s: fn.label for s, fn in funcs.items()},
        kinds={s: fn.kind for s, fn in funcs.items()},
        descriptions={s: fn.description for s, fn in funcs.items()},
        limits={s: fn.limit for s, fn in funcs.items() if isinstance(getattr(fn, "limit", None), int)},
        limit_settings={s: fn.limit_setting for s, fn in funcs.items() if getattr(fn, "limit_setting", None)},
        failed=failed,
    )
