from __future__ import annotations

from dataclasses import dataclass
from importlib.resources import as_file
from importlib.resources import files as pkg_files
from pathlib import Path
from typing import Any

try:
    import tomllib as toml
except Exception:
    import tomli as toml  # type: ignore

from regnum.utility import UserInputError
from regnum.workspace import profiles_dir


@dataclass
class Settings:
    """
    Wrap the full TOML dict (without the [_PROFILE_] section).
    .as_dict() feeds runtime.apply().

    Added fields:
      - name:        resolved profile name (FILE.stem if not provided in [_PROFILE_])
      - description: one-line description from [_PROFILE_] or "(no description)"
    """
    data: dict[str, Any]
    name: str
    description: str
    _source: Path | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.data


# --- Paths -----------------------------------------------------------------

def _packaged_profile_path(name: str) -> Path | None:
    ref = pkg_files("regnum") / "profiles" / f"{name}.toml"
    with as_file(ref) as real:
        p = Path(real)
    return p if p.is_file() else None


def _profile_path(name: str) -> Path | None:
    """Workspace profile first, then the packaged one."""
    ws = profiles_dir() / f"{name}.toml"
    if ws.is_file():
        return ws
    return _packaged_profile_path(name)


# --- I/O -------------------------------------------------------------------


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as f:
            return toml.load(f)
    except Exception as e:
        lineno = getattr(e, "lineno", None)
        colno = getattr(e, "colno", None)
        msg = getattr(e, "msg", str(e))
        where = []
        if lineno is not None:
            where.append(f"line {lineno}")
        if colno is not None:
            where.append(f"column {colno}")
        loc = f" (at {', '.join(where)})" if where else ""
        # No traceback chaining
        raise UserInputError(f"reading {path.name}: {msg}{loc}.") from None


# --- Metadata handling -----------------------------------------------------


def _sanitize_oneline(s: str) -> str:
    return " ".join(str(s).split()) or "(no description)"


def _split_profile_data(raw: dict[str, Any], fallback_name: str) -> tuple[dict[str, Any], str, str]:
    """
    Extract [_PROFILE_] meta (name, description) and return:
      (settings_without_profile, resolved_name, resolved_description)
    """
    meta = raw.get("_PROFILE_") or {}
    if "_PROFILE_" in raw:
        raw = {k: v for k, v in raw.items() if k != "_PROFILE_"}

    name = str(meta.get("name") or fallback_name)
    description = _sanitize_oneline(str(meta.get("description") or ""))

    return raw, name, description


# --- Public API ------------------------------------------------------------


def list_all_profiles() -> list[str]:
    """
    Return the names (filename stems) of workspace and packaged profiles.
    """
    names: set[str] = set()
    pdir = profiles_dir()
    if pdir.is_dir():
        names.update(p.stem for p in pdir.glob("*.toml"))
    with as_file(pkg_files("regnum") / "profiles") as real:
        packaged = Path(real)
        if packaged.is_dir():
            names.update(p.stem for p in packaged.glob("*.toml"))
    return sorted(names)


def list_profiles_with_descriptions() -> list[tuple[str, str]]:
    """
    Return [(name, description), ...] for all profiles.
    Profiles lacking [_PROFILE_] get "(no description)".
    """
    items: list[tuple[str, str]] = []
    for stem in list_all_profiles():
        path = _profile_path(stem)
        if path is None:
            continue
        try:
            raw = _load_toml(path)
            _, nm, desc = _split_profile_data(raw, stem)
            items.append((nm, desc))
        except UserInputError:
            # Still list a broken profile by its filename
            items.append((stem, "(unreadable profile)"))
    return sorted(items, key=lambda t: t[0].lower())


def has_profile(name: str) -> bool:
    return _profile_path(name) is not None


def load_settings(name: str | None) -> Settings:
    """
    Load a profile by name (default 'default'), strip the [_PROFILE_] metadata
    and return Settings(data=..., name=..., description=..., _source=path).
    """
    if not name:
        name = "default"

    path = _profile_path(name)
    if path is None:
        raise UserInputError(f"profile '{name}' not found (looked in {profiles_dir()} and the package).")

    raw = _load_toml(path)
    data, resolved_name, description = _split_profile_data(raw, path.stem)

    # Sections must be tables; anything else is a profile typo
    for section in ("ALGORITHMS", "DISPLAY", "BEHAVIOUR"):
        val = data.get(section, {})
        if not isinstance(val, dict):
            raise UserInputError(f"reading {path.name}: [{section}] must be a table.")

    return Settings(
        data=data,
        name=resolved_name,
        description=description,
        _source=path,
    )
