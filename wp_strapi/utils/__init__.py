"""
Utility helpers used by the migration tool.

This subpackage exposes convenience functions for structured logging and
redirect map generation.
"""

from .errors import ERRORS, default_log, report_error, report_ok
from .redirects import generate_redirects_csv

__all__ = ["ERRORS", "default_log", "report_error", "report_ok", "generate_redirects_csv"]
