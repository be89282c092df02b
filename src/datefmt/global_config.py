"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared defaults and cross-cutting constants that many modules can import.

Library code never reads the environment. The environment variable names
below are consumed by the CLI only, as Typer option ``envvar`` values.
"""

from pathlib import Path

# Core roots
PACKAGE_ROOT: Path = Path(__file__).resolve().parent

# Core Names
PROJECT_NAME = "datefmt"
PACKAGE_NAME = "datefmt"

# Formatting defaults
DEFAULT_LANGUAGE = "en-US"
DEFAULT_VARIANT = "datetime-short"

# CLI environment overrides
ENV_LANGUAGE = "DATEFMT_LANGUAGE"
ENV_TIME_ZONE = "DATEFMT_TIME_ZONE"
