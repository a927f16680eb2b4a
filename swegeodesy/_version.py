"""
Exposes the version of swegeodesy
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _read_version_file() -> str | None:
    """
    Fallback when running from a source tree without installed metadata; reads the
    repo-root VERSION file.
    """
    path = Path(__file__).resolve().parents[1] / "VERSION"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError:
        return None


try:
    __version__ = version("swegeodesy")
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ["__version__"]
