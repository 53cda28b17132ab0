"""Core utilities shared across models, lookup and runtime layers.

Exports:
    BabelImportError: Exception raised when a Babel-only feature is used without Babel
    is_babel_available: Check whether the optional Babel dependency is installed

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available

__all__ = ["BabelImportError", "is_babel_available"]
