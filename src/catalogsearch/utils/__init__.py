"""Utility modules for catalogsearch."""

from catalogsearch.utils.config import resolve_setting, set_setting
from catalogsearch.utils.debug import logf

__all__ = ["resolve_setting", "set_setting", "logf"]
