"""
Billingo CLI
Development entry point: `python main.py documents list`.

The installed `billingohu` script runs the same app.
"""

import sys
from pathlib import Path

# Add lib directory to path for the billingo client library
LIB_PATH = Path(__file__).parent / "lib"
if str(LIB_PATH) not in sys.path:
    sys.path.insert(0, str(LIB_PATH))

from app.cli.main import run  # noqa: E402


if __name__ == "__main__":
    run()
