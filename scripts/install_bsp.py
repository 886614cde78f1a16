#!/usr/bin/env python
"""Runner script for the cargo-bsp installer.

Run it from the cargo-bsp checkout; the server is built there and registered
in the given project:

    python scripts/install_bsp.py ~/projects/my-crate
"""

import sys
from pathlib import Path

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from cargo_bsp_installer.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
