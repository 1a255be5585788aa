from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class ComparisonConfig:
    # raise instead of returning an empty record for unknown ids
    strict: bool = os.getenv("COMPARISON_STRICT", "0") == "1"
    wrong_count_message: str = "You have to select 2 options"


DEFAULT_COMPARISON_CONFIG = ComparisonConfig()
