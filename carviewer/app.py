from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from pydantic import BaseModel, Field

from .catalog.aggregator import fetch_snapshot
from .catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .catalog.lookup import describe
from .catalog.models import CatalogView, Snapshot
from .comparison.config import DEFAULT_COMPARISON_CONFIG, ComparisonConfig
from .comparison.selector import select_pair
from .errors import CarViewerError, RangeFormatError, SelectionError
from .filtering.engine import filter_snapshot
from .filtering.models import FilterCriteria
from .preferences.config import DEFAULT_PREFERENCE_CONFIG, PreferenceConfig
from .preferences.ranker import rank
from .preferences.store import PreferenceStore

logger = logging.getLogger(__name__)


class CompareRequest(BaseModel):
    options: list[str] = Field(default_factory=list)


def get_store(request: Request) -> PreferenceStore:
    return request.app.state.preferences


async def _load_snapshot(request: Request) -> Snapshot:
    try:
        return await fetch_snapshot(request.app.state.catalog_config, request.app.state.transport)
    except CarViewerError as e:
        logger.error("Error getting car data from API: %s", e)
        raise HTTPException(status_code=500, detail="Internal Server Error") from e


def _finish(snapshot: Snapshot, store: PreferenceStore, **extra) -> CatalogView:
    # persisted before ranking, ranking then seeds unseen names with 0
    store.persist()
    return CatalogView.from_snapshot(rank(snapshot, store), **extra)


def create_app(
    catalog_config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
    preference_config: PreferenceConfig = DEFAULT_PREFERENCE_CONFIG,
    comparison_config: ComparisonConfig = DEFAULT_COMPARISON_CONFIG,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # a missing preference file aborts startup
        app.state.preferences = PreferenceStore.load(preference_config.path)
        yield
        app.state.preferences.persist()

    app = FastAPI(title="Car Catalog Viewer", version="1.0.0", lifespan=lifespan)
    app.state.catalog_config = catalog_config
    app.state.preference_config = preference_config
    app.state.comparison_config = comparison_config
    app.state.transport = transport

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/", response_model=CatalogView)
    async def index(
        request: Request,
        store: PreferenceStore = Depends(get_store),
    ) -> CatalogView:
        snapshot = await _load_snapshot(request)
        return _finish(snapshot, store)

    @app.post("/", response_model=CatalogView)
    async def compare(
        body: CompareRequest,
        request: Request,
        store: PreferenceStore = Depends(get_store),
    ) -> CatalogView:
        snapshot = await _load_snapshot(request)
        try:
            first, second = select_pair(
                snapshot,
                body.options,
                store,
                hard_weight=preference_config.hard_weight,
                config=comparison_config,
            )
        except SelectionError as e:
            return _finish(snapshot, store, message=str(e))

        pair = [describe(snapshot, first, second), describe(snapshot, second, first)]
        return _finish(snapshot, store, is_popup=True, compare_models=pair)

    @app.get("/filtered", response_model=CatalogView)
    async def filtered(
        request: Request,
        manufacturer: str = Query(""),
        category: str = Query(""),
        drivetrain: str = Query(""),
        transmission: str = Query(""),
        horsepower: str = Query(""),
        store: PreferenceStore = Depends(get_store),
    ) -> CatalogView:
        criteria = FilterCriteria(
            manufacturer=manufacturer,
            category=category,
            drivetrain=drivetrain,
            transmission=transmission,
            horsepower=horsepower,
        )
        snapshot = await _load_snapshot(request)
        try:
            result = filter_snapshot(snapshot, criteria, store, soft_weight=preference_config.soft_weight)
        except RangeFormatError as e:
            logger.error("Error getting filtered car data: %s", e)
            raise HTTPException(status_code=500, detail="Internal Server Error") from e
        return _finish(result, store)

    # ── Preference stats ─────────────────────────────────────────────────

    @app.get("/preferences")
    def preferences(store: PreferenceStore = Depends(get_store)) -> dict:
        return store.get_stats(top_n=preference_config.top_n)

    return app


app = create_app()
