"""CLI helpers for EMPDEPT.

Utilities used by the command-line interface: the NAME=LEVEL logger-level
parser, stderr message emitters with emoji→ASCII fallbacks, and Rich table
rendering for query results.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn
from .tables import render_rows

__all__ = ["parse_log_level", "warn", "success", "error", "render_rows"]
