"""Version of the liteargs distribution.

Installed copies report the version recorded in their package metadata; a
source checkout that was never installed reports ``_SOURCE_VERSION``, which
is kept in step with ``pyproject.toml``.
"""

from __future__ import annotations

from importlib import metadata

__all__ = ["__version__"]

_DISTRIBUTION = "liteargs"
_SOURCE_VERSION = "0.1.0"


def _resolve_version() -> str:
    try:
        return metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return _SOURCE_VERSION


__version__ = _resolve_version()
