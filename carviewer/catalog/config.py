from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_API_BASE = os.getenv("CATALOG_API_BASE", "http://localhost:3000/api").rstrip("/")


@dataclass(frozen=True)
class CatalogConfig:
    manufacturers_url: str = os.getenv("CATALOG_MANUFACTURERS_URL", f"{_API_BASE}/manufacturers")
    models_url: str = os.getenv("CATALOG_MODELS_URL", f"{_API_BASE}/models")
    categories_url: str = os.getenv("CATALOG_CATEGORIES_URL", f"{_API_BASE}/categories")
    timeout: float = float(os.getenv("CATALOG_TIMEOUT", "10.0"))
    user_agent: str = "CarViewer/1.0"


DEFAULT_CATALOG_CONFIG = CatalogConfig()
