"""Launch WaveScope from a source checkout without installing the package."""

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from wavescope.gui.application import main  # noqa: E402

if __name__ == "__main__":
    main(sys.argv)
