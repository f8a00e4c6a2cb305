# topmark:header:start
#
#   project      : TypeSniff
#   file         : constants.py
#   file_relpath : src/typesniff/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    TYPESNIFF_VERSION: str = get_version("typesniff")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    TYPESNIFF_VERSION = "0.0.0"

# Generic "unspecified binary" label; a declared type equal to this is ignored.
BINARY: Final[str] = "application/octet-stream"

# Configuration discovery
CONFIG_FILE_NAME: Final[str] = "typesniff.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[tuple[str, ...]] = ("tool", "typesniff")

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: Final[str] = "TYPESNIFF_LOG_LEVEL"

# Entry point group for plugin-provided type definitions
ENTRYPOINT_GROUP: Final[str] = "typesniff.types"
