"""Load configuration from environment."""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Optional YAML keyword table; the bundled table is used when unset.
SKILLS_FILE = os.getenv("SKILLSCOUT_SKILLS_FILE") or None

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def skills_file_path() -> Path | None:
    """Resolve SKILLSCOUT_SKILLS_FILE relative to the project root when it is not absolute."""
    if not SKILLS_FILE:
        return None
    path = Path(SKILLS_FILE).expanduser()
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def validate_skills_file() -> None:
    """Validate that SKILLSCOUT_SKILLS_FILE, when set, points at an existing file."""
    path = skills_file_path()
    if path is not None and not path.is_file():
        raise ValueError(f"SKILLSCOUT_SKILLS_FILE does not exist: {path}. Fix it in .env or unset it.")
