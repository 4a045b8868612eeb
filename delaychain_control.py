#!/usr/bin/env python3
"""
Delay Chain GUI - run the touchscreen remote from a source checkout.
Same as the installed `delaychain-gui` command.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from delaychain.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
