from __future__ import annotations

import os
from pathlib import Path


def workspace_dir() -> Path:
    env = os.environ.get("REGNUM_HOME")
    if env:
        return Path(env).expanduser().resolve()
    return (Path.home() / "Documents" / "Regnum").resolve()


def profiles_dir() -> Path:
    return workspace_dir() / "profiles"
