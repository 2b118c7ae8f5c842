"""Smoke tests for unified entry points.

These tests assert that `python -m tasklocation` and the console script
both resolve to the CLI's `main` function exposed under `tasklocation.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m tasklocation` path exposes a `main` callable."""
    m = import_module("tasklocation.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `tasklocation.ui.cli:main` and is importable."""
    m = import_module("tasklocation.ui.cli")
    assert hasattr(m, "main")


def test_package_exports_codec() -> None:
    import tasklocation

    assert tasklocation.decode("executor_h1_2") == tasklocation.executor_location("h1", "2")
