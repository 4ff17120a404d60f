"""Environment-driven defaults for the decparse CLI.

Values are read from os.environ at call time so tests and shells can change
them without reimporting. CLI options always win over these.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path


class OutputFormat(str, Enum):
    """How parse results are printed."""

    TABLE = "table"
    TREE = "tree"
    JSON = "json"


FORMAT_VAR = "DECPARSE_FORMAT"
REPORT_PATH_VAR = "DECPARSE_REPORT_PATH"

_DEFAULT_REPORT_PATH = "PARSE_REPORT.md"


def default_format() -> OutputFormat:
    """Output format from DECPARSE_FORMAT, falling back to table."""
    raw = os.environ.get(FORMAT_VAR, OutputFormat.TABLE.value).strip().lower()
    try:
        return OutputFormat(raw)
    except ValueError:
        return OutputFormat.TABLE


def default_report_path() -> Path:
    """Report destination from DECPARSE_REPORT_PATH or PARSE_REPORT.md."""
    return Path(os.environ.get(REPORT_PATH_VAR, _DEFAULT_REPORT_PATH))
