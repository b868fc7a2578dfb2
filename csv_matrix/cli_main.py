"""CLI entry point for csv-matrix.

The commands live in the cli/ package; this module only exposes the click
group for ``python -m csv_matrix.cli_main``.
"""

from __future__ import annotations

from .cli import app

__all__ = ["app"]


if __name__ == "__main__":  # pragma: no cover - manual CLI invocation
    app()
