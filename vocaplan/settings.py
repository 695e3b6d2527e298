"""
Local data locations for vocaplan.

Everything lives on-device under VOCAPLAN_HOME (default ~/.vocaplan):
- lessons.db: confirmed lessons (word sets + schedules)
- progress.db: student progress

The curated phonics table ships inside the package (vocaplan/data) and can
be swapped with VOCAPLAN_PHONICS_TABLE.
"""

import os
from pathlib import Path


DEFAULT_DATA_DIR = Path(os.environ.get("VOCAPLAN_HOME", Path.home() / ".vocaplan"))
DEFAULT_LESSONS_DB = DEFAULT_DATA_DIR / "lessons.db"
DEFAULT_PROGRESS_DB = DEFAULT_DATA_DIR / "progress.db"

# Bundled curated table (package data)
DEFAULT_PHONICS_TABLE = Path(
    os.environ.get("VOCAPLAN_PHONICS_TABLE", Path(__file__).parent / "data" / "phonics" / "curated.txt")
)
