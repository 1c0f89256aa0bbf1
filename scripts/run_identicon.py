#!/usr/bin/env python3
"""Identicon generator runner.

Usage:
    python scripts/run_identicon.py banana
    python scripts/run_identicon.py alice bob --output-dir /tmp/icons
    python scripts/run_identicon.py banana -c scripts/user_config.py --backend matplotlib

Note: User config in scripts/user_config.py, expert defaults in
src/identicon/schemas/param.py
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from identicon.cli.run_identicon import main


if __name__ == "__main__":
    sys.exit(main())
