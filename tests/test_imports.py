"""Tests for Caldate package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_caldate() -> None:
    """Import caldate package succeeds."""
    import caldate

    assert hasattr(caldate, "__version__")
    assert caldate.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import caldate.core submodule succeeds."""
    from caldate import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import caldate.units submodule succeeds."""
    from caldate import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import caldate.format submodule succeeds."""
    from caldate import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_public_names_exported() -> None:
    """Every name in caldate.__all__ resolves."""
    import caldate

    for name in caldate.__all__:
        assert hasattr(caldate, name), name


def test_pattern_error_is_value_error() -> None:
    """PatternError can be caught as a builtin ValueError."""
    from caldate import CaldateError, PatternError

    assert issubclass(PatternError, ValueError)
    assert issubclass(PatternError, CaldateError)
