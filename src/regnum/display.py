# src/regnum/display.py
from __future__ import annotations

from colorama import Fore, Style

from regnum.config import list_profiles_with_descriptions
from regnum.fmt import abbr_int_cfg, format_log2, format_seconds, format_triple
from regnum.registry import Index
from regnum.runner import Outcome
from regnum.runtime import CFG
from regnum.utility import is_regular, triple_to_int, verify_triple

SEPARATOR = "+" * 70


def print_menu(index: Index) -> None:
    run_all = max(index.selectors, default=0) + 1
    print("Please choose from the following functions to calculate the Nth regular number:")
    for pos, (sel, label) in enumerate(index.labels.items()):
        lead = "Press" if pos == 0 else "     "
        print(f"{lead} {sel} -- {Fore.GREEN}{label}(){Style.RESET_ALL}")
    print("-OR-")
    print(f"      {run_all} -- run all options")
    print("      any other key to quit\n")


def show_algorithm_list(index: Index) -> None:
    print(f"{Fore.YELLOW}Available algorithms: {len(index.funcs)}{Style.RESET_ALL}\n")
    for sel, label in index.labels.items():
        kind = index.kinds[sel]
        lim = index.limits.get(sel)
        if lim is not None and sel in index.limit_settings:
            lim = int(CFG(index.limit_settings[sel], lim))
        extra = f" (n <= {lim})" if lim is not None else ""
        print(f"  {sel}  {Fore.GREEN}{label}{Style.RESET_ALL} [{kind}]{extra} — {index.descriptions[sel]}")
    for modname, err in index.failed:
        print(f"  {Fore.RED}failed to load{Style.RESET_ALL} {modname}: {err}")


def _verification_lines(outcome: Outcome) -> list[str]:
    if outcome.kind == "int":
        ok = is_regular(outcome.value)
        return [f"regular (sympy factorint):  {_ok_token(ok)}"]
    if outcome.kind == "triple":
        log2_value, coef = outcome.value
        exact = triple_to_int(coef)
        ok = verify_triple(log2_value, coef)
        return [
            f"exact value:  {abbr_int_cfg(int(exact))}",
            f"triple reconstructs log2:  {_ok_token(ok)}",
        ]
    return []


def _ok_token(ok: bool) -> str:
    if ok:
        return f"{Fore.GREEN}{Style.BRIGHT}yes{Style.RESET_ALL}"
    return f"{Fore.RED}{Style.BRIGHT}NO{Style.RESET_ALL}"


def print_outcome(outcome: Outcome, *, verify: bool = False) -> None:
    """Render one timed result the way the menu driver always has."""
    if outcome.kind == "int":
        print(f"Nth number:  {outcome.value}")
    elif outcome.kind == "log2":
        print(f"log2 of Nth number:  {format_log2(outcome.value)}")
    else:
        log2_value, coef = outcome.value
        print(f"powers of Nth number:  {format_triple(coef)}")
        print(f"log2 of Nth number:  {format_log2(log2_value)}")

    if verify:
        for line in _verification_lines(outcome):
            print(line)
    print(f"run time: {format_seconds(outcome.elapsed)} seconds.\n\n")


def print_run_header(label: str, n: int) -> None:
    print(f"{SEPARATOR}\n")
    print(f"Running {Fore.CYAN}{label}(N){Style.RESET_ALL} with N = {n}.\n")


def print_profiles_with_descriptions(current: str | None = None) -> None:
    pairs = list_profiles_with_descriptions()
    if not pairs:
        print("\nAvailable profiles: (none)")
        return

    lines = []
    for name, desc in pairs:
        mark = "*" if current and name == current else " "
        lines.append(f"{mark} {name:13} — {desc}")
    print("\nAvailable profiles:\n  " + "\n  ".join(lines))
