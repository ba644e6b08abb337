from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_VOCABULARY = DATA_DIR / "schema_org.yml"
DEFAULT_CONTEXT = DATA_DIR / "schema_org_context.json"

def find_project_root(start: Optional[Path] = None) -> Path:
    """Walk up from `start` looking for a pyproject.toml; fall back to `start`."""
    start = (start or Path.cwd()).resolve()
    cur = start
    while True:
        if (cur / "pyproject.toml").exists():
            return cur
        if cur.parent == cur:
            return start
        cur = cur.parent

def load_env(project_root: Optional[Path] = None) -> None:
    """Load a .env file from the project root without overriding the environment."""
    dotenv_path = (project_root or find_project_root()) / ".env"
    if dotenv_path.exists():
        load_dotenv(dotenv_path, override=False)

def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}

@dataclass(frozen=True)
class SdcheckConfig:
    vocabulary_path: Path = DEFAULT_VOCABULARY
    context_path: Path = DEFAULT_CONTEXT
    verbose: bool = False

    @staticmethod
    def from_env() -> "SdcheckConfig":
        load_env()
        vocab = Path(os.environ.get("SDCHECK_VOCABULARY", str(DEFAULT_VOCABULARY)))
        context = Path(os.environ.get("SDCHECK_CONTEXT", str(DEFAULT_CONTEXT)))
        return SdcheckConfig(
            vocabulary_path=vocab,
            context_path=context,
            verbose=_flag(os.environ.get("SDCHECK_VERBOSE")),
        )
