"""Start the NextStep Streamlit app.

Usage:
    nextstep            (console script)
    python -m nextstep
"""

import subprocess
import sys
from pathlib import Path

GUI_PATH = Path(__file__).resolve().parent / "gui.py"


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    cmd = [sys.executable, "-m", "streamlit", "run", str(GUI_PATH), *args]
    return subprocess.call(cmd)
