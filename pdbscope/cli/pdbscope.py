"""Entry point for the pdbscope CLI."""

from __future__ import annotations

import sys

from pdbscope.app import main as run


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
