"""Environment-variable-based configuration for exports and the CLI."""

from __future__ import annotations

import os
from pathlib import Path

OUTPUT_DIR: Path = Path(os.environ.get("MESOCYCLE_OUTPUT_DIR", "exports")).expanduser()
PAPER_SIZE: str = os.environ.get("MESOCYCLE_PAPER_SIZE", "a4")
PDF_MODE: str = os.environ.get("MESOCYCLE_PDF_MODE", "detailed")
LOG_LEVEL: str = os.environ.get("MESOCYCLE_LOG_LEVEL", "INFO")
