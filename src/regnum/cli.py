# src/regnum/cli.py

"""
Regnum - the Nth regular number, six ways

Description:
    Computes the Nth regular (5-smooth, Hamming) number 2^i * 3^j * 5^k with
    six algorithms, from brute-force factoring to a geometric lattice-point
    count, and times each of them.

usage: regnum -h
"""

from __future__ import annotations

import argparse
import faulthandler
import sys
import textwrap
import traceback

from colorama import Fore, Style
from colorama import init as colorama_init

from regnum import __version__ as _ver
from regnum import config as CONFIG
from regnum.display import (
    print_menu,
    print_outcome,
    print_profiles_with_descriptions,
    print_run_header,
    show_algorithm_list,
)
from regnum.registry import Index, discover
from regnum.runner import run_all
from regnum.runtime import APPLY, ensure_runtime_deps
from regnum.runtime import current as _rt_current
from regnum.utility import UserInputError


def _install_loud_error_handlers(debug: bool) -> None:
    if not debug:
        return
    # Always show full Python tracebacks
    try:
        faulthandler.enable()
    except (AttributeError, ValueError, OSError):
        # stderr without a real file descriptor (captured or redirected)
        pass

    def _excepthook(exc_type, exc, tb):
        sys.stderr.write("\n[UNCAUGHT EXCEPTION]\n")
        traceback.print_exception(exc_type, exc, tb, file=sys.stderr)
        sys.stderr.flush()
    sys.excepthook = _excepthook


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not (msg.startswith("Invalid input:") or msg.startswith("Error:")):
        msg = f"{prefix} {msg}"
    print(msg, file=sys.stderr)


def parse_ordinal(text: str) -> int:
    """Parse N from user text ('1000', '1_000', ' 42 '); N must be >= 1."""
    s = str(text).strip().replace("_", "")
    try:
        n = int(s)
    except ValueError:
        raise UserInputError(f"Invalid input: '{text}' is not an integer.") from None
    if n < 1:
        raise UserInputError(f"Invalid input: N must be an integer > 0 (got {n}).")
    return n


def parse_selection(text: str, index: Index) -> int | None:
    """
    Menu choice -> selector, 0 for 'run all', None to quit.
    Anything outside 1..(last selector + 1) quits the menu.
    """
    try:
        x = int(str(text).strip())
    except ValueError:
        return None
    all_choice = max(index.selectors, default=0) + 1
    if x == all_choice:
        return 0
    if x in index.funcs:
        return x
    return None


def run_selection(index: Index, selection: int, n: int, *, verify: bool = False) -> list:
    """Run one selector (or all for 0), printing each result as it completes."""
    return run_all(
        index,
        n,
        None if selection == 0 else [selection],
        before=lambda sel: print_run_header(index.labels[sel], n),
        after=lambda outcome: print_outcome(outcome, verify=verify),
    )


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:

    epilog = textwrap.dedent("""\
    commands:
      list
          List the algorithms with their menu numbers.

      profiles
          List the available settings profiles.

    Without N an interactive menu asks for N and the algorithm, repeatedly.
    """)

    p = argparse.ArgumentParser(
        prog="regnum",
        description="Regnum — the Nth regular (5-smooth) number, six ways",
        usage=(
            "regnum [N] [--algo K] [--profile NAME] [--verify] [--debug]\n"
            "       regnum list | profiles\n"
            "       regnum -h | --help\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    p.add_argument("items", nargs="*", metavar="N",
                   help="ordinal of the regular number (1 = the number 1), or a command")
    p.add_argument("-a", "--algo", type=int, default=None,
                   help="algorithm number from the menu (default: run all)")
    p.add_argument("--profile", default=None, help="settings profile to apply (default: 'default')")
    p.add_argument("--verify", action="store_true",
                   help="check exact results with gmpy2/sympy after each run")
    p.add_argument("--debug", action="store_true", help="Show timings on stderr and full tracebacks")
    p.add_argument("--version", action="version", version=f"%(prog)s {_ver}")
    return p


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except UserInputError as e:
        _print_user_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        debug = ("--debug" in (argv if argv is not None else sys.argv))
        if debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


# ---- main ----
def _main_impl(argv=None) -> int:

    colorama_init(autoreset=True)

    parser = _build_parser()
    args = parser.parse_args(argv)

    _install_loud_error_handlers(args.debug)

    if args.verify and not ensure_runtime_deps(strict=True):
        return 1

    # Load & apply profile; --debug wins over the profile's BEHAVIOUR.DEBUG
    selected = CONFIG.load_settings(args.profile)
    APPLY(selected)
    rt = _rt_current()
    if args.debug:
        rt.debug = True
        print(f"[debug] active profile: {selected.name}", file=sys.stderr)
        if selected._source:
            print(f"[debug] profile file: {selected._source}", file=sys.stderr)

    index = discover()
    if rt.debug:
        print(f"[debug] discovered algorithms: {len(index.funcs)}", file=sys.stderr)
        for modname, err in index.failed:
            print(f"[discovery] {Fore.RED}FAIL{Style.RESET_ALL} {modname}: {err}", file=sys.stderr)

    first = args.items[0].lower() if args.items else None
    if first == "list":
        show_algorithm_list(index)
        return 0
    if first == "profiles":
        print_profiles_with_descriptions(current=selected.name)
        return 0

    # --- one-shot path ---
    if first is not None:
        if len(args.items) > 1:
            raise UserInputError(f"Invalid input: expected a single N, got {' '.join(args.items)}.")
        n = parse_ordinal(args.items[0])
        selection = 0
        if args.algo is not None:
            selection = parse_selection(str(args.algo), index)
            if selection is None:
                valid = ", ".join(str(s) for s in index.selectors)
                raise UserInputError(f"unknown algorithm {args.algo}; choose one of {valid} "
                                     f"or {max(index.selectors) + 1} for all.")
        run_selection(index, selection, n, verify=args.verify)
        return 0

    # --- REPL ---
    print(f"{Fore.YELLOW}{Style.BRIGHT}Regnum v{_ver} — the Nth regular number{Style.RESET_ALL}")
    return _menu_loop(index, verify=args.verify)


def _menu_loop(index: Index, *, verify: bool = False) -> int:
    while True:
        try:
            print("Functions to calculate the Nth regular number.")
            user_input = input("Please enter an integer greater than 0 to use as N (q=Quit):\n").strip()
            if user_input.lower() in {"q", "quit"}:
                break
            try:
                n = parse_ordinal(user_input)
            except UserInputError as e:
                msg = str(e)
                prefix = f"{Fore.RED}Invalid input:{Style.RESET_ALL}"
                print(msg.replace("Invalid input:", prefix, 1), file=sys.stderr)
                continue

            print_menu(index)
            selection = parse_selection(input(), index)
            if selection is None:
                break
            run_selection(index, selection, n, verify=verify)

        except (EOFError, KeyboardInterrupt):
            print()
            break
        except Exception as e:
            if _rt_current().debug:
                traceback.print_exc()
            else:
                _print_user_error(f"{e.__class__.__name__}: {e}")
            continue
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
