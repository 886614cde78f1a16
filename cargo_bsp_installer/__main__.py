"""Allow ``python -m cargo_bsp_installer DIRECTORY``."""

import sys

from cargo_bsp_installer.cli import main

if __name__ == "__main__":
    sys.exit(main(prog="python -m cargo_bsp_installer"))
