"""Locate and read shipdisc.toml.

Lookup order: the SHIPDISC_CONFIG env var, then the nearest shipdisc.toml
in the start directory or any of its parents.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "shipdisc.toml"
CONFIG_ENV_VAR = "SHIPDISC_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the shipdisc.toml governing *start* (default: cwd), or None.

    An env var pointing at a missing file disables discovery entirely.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    base = (start or Path.cwd()).resolve()
    for directory in (base, *base.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, reporting syntax errors as a ClickException."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
