"""Permite `python -m apidelirius ...`."""

from __future__ import annotations

from apidelirius.cli.main import run

if __name__ == "__main__":
    run()
