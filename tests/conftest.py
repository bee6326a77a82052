import sys
from pathlib import Path

# Run against the source tree without installing, and let tests import fixtures.py
ROOT = Path(__file__).resolve().parents[1]
for path in (ROOT / "src", ROOT / "tests"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
