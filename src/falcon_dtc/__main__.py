"""CLI entrypoint for falcon_dtc."""

from __future__ import annotations

import sys

from .cartridge import main


if __name__ == "__main__":
    sys.exit(main())
