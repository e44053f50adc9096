# this_file: quadicon/project.py
"""
Example-app setup steps around icon generation: making sure
``@capacitor/assets`` is installed and running its generator.
"""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from .base import QuadiconError
from .constants import (
    ICON_BACKGROUND,
    ICON_BACKGROUND_DARK,
    SPLASH_BACKGROUND,
    SPLASH_BACKGROUND_DARK,
)

CAPACITOR_ASSETS = "@capacitor/assets"

Logger = Callable[[str], None]


def _silent(message: str) -> None:
    pass


class CommandError(QuadiconError):
    """Raised when a setup command cannot be run or exits non-zero."""


def run_command(cmd: Sequence[str], cwd: Path | str, log: Logger = _silent) -> None:
    """Run ``cmd`` with inherited stdio."""
    line = " ".join(cmd)
    log(f"[INFO] Running command: {line}")
    try:
        result = subprocess.run(list(cmd), cwd=cwd)
    except OSError as exc:
        raise CommandError(f"Command failed ({line}): {exc}") from exc
    if result.returncode != 0:
        raise CommandError(f"Command failed ({line}) with exit code {result.returncode}")


def read_package_json(path: Path) -> dict[str, Any]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise QuadiconError(f"Cannot read {path}: {exc}") from exc


def has_dev_dependency(package: dict[str, Any], name: str) -> bool:
    return bool((package.get("devDependencies") or {}).get(name))


def ensure_capacitor_assets(project_dir: Path, log: Logger = _silent) -> bool:
    """
    Install ``@capacitor/assets`` as a dev dependency when package.json lacks it.

    Returns:
        True if an install was run.
    """
    package_json = project_dir / "package.json"
    log(f"[INFO] Checking dev dependency '{CAPACITOR_ASSETS}' in {package_json}")
    if has_dev_dependency(read_package_json(package_json), CAPACITOR_ASSETS):
        log(f"[INFO] '{CAPACITOR_ASSETS}' already present.")
        return False

    log(f"[INFO] '{CAPACITOR_ASSETS}' not found. Installing as dev dependency.")
    run_command(["npm", "install", "--save-dev", CAPACITOR_ASSETS], project_dir, log)
    if has_dev_dependency(read_package_json(package_json), CAPACITOR_ASSETS):
        log(f"[INFO] Verified '{CAPACITOR_ASSETS}' installation.")
    else:
        log(f"[WARN] Unable to verify '{CAPACITOR_ASSETS}' installation from package.json.")
    return True


def capacitor_assets_command() -> list[str]:
    return [
        "npx",
        CAPACITOR_ASSETS,
        "generate",
        "--iconBackgroundColor",
        ICON_BACKGROUND,
        "--iconBackgroundColorDark",
        ICON_BACKGROUND_DARK,
        "--splashBackgroundColor",
        SPLASH_BACKGROUND,
        "--splashBackgroundColorDark",
        SPLASH_BACKGROUND_DARK,
    ]


def run_capacitor_assets(project_dir: Path, log: Logger = _silent) -> None:
    log(f"[INFO] Running {CAPACITOR_ASSETS} generate command")
    run_command(capacitor_assets_command(), project_dir, log)
