"""Module entrypoint for running textsplice as ``python -m textsplice``."""

from __future__ import annotations

from textsplice.cli import main


if __name__ == "__main__":
    main()
