"""Run abletime from a source checkout: `python main.py [DIRECTORY] [OPTIONS]`.

Prepends `src/` to `sys.path` so no editable install is needed.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from abletime.cli.main import run  # noqa: E402

if __name__ == "__main__":
    run()
