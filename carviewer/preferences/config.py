from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class PreferenceConfig:
    path: Path = Path(os.getenv("PREFERENCES_PATH", "pref.csv"))
    # added to every model that survives a filter query
    soft_weight: float = 0.5
    # added to each model explicitly picked for comparison
    hard_weight: float = 1.0
    top_n: int = 10


DEFAULT_PREFERENCE_CONFIG = PreferenceConfig()
