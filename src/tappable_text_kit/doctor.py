from __future__ import annotations

import os
import platform
import sys
from importlib import metadata
from typing import Optional

from .notify import NOTIFIER_ENV


def _dist_version(dist_name: str) -> Optional[str]:
    try:
        return metadata.version(dist_name)
    except metadata.PackageNotFoundError:
        return None


def _module_importable(module_name: str) -> bool:
    try:
        __import__(module_name)
        return True
    except ImportError:
        return False


def collect_doctor_info() -> dict[str, object]:
    """
    Collect a best-effort environment report for `ttk doctor`.

    This should stay lightweight and side-effect free (no network, no browser).
    """

    # Dist names (PyPI) may differ from import names.
    dists: dict[str, str] = {
        # Core
        "regex": "regex",
        "typer": "typer",
        "rich": "rich",
        # Optional features
        "fastapi": "fastapi",
        "pydantic": "pydantic",
        "httpx": "httpx",
        "pytest": "pytest",
    }

    packages: dict[str, dict[str, object]] = {}
    for name, dist in dists.items():
        v = _dist_version(dist)
        packages[name] = {"installed": v is not None, "version": v}

    return {
        "python": {"version": sys.version.split()[0], "executable": sys.executable},
        "platform": {
            "system": platform.system(),
            "release": platform.release(),
            "machine": platform.machine(),
        },
        "features": {
            "api_service_importable": _module_importable("fastapi"),
            "notifier": os.getenv(NOTIFIER_ENV) or "log",
        },
        "packages": packages,
    }
