from __future__ import annotations

import asyncio
import logging

import httpx
from pydantic import TypeAdapter

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .fetcher import fetch_records
from .models import CarModel, Category, Manufacturer, Snapshot

logger = logging.getLogger(__name__)

_MANUFACTURERS = TypeAdapter(list[Manufacturer])
_MODELS = TypeAdapter(list[CarModel])
_CATEGORIES = TypeAdapter(list[Category])


async def fetch_snapshot(
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Snapshot:
    """
    Fetch manufacturers, models and categories concurrently and merge them.

    All three or nothing: the first failure cancels the fetches still in
    flight and is re-raised, so callers never see a partial snapshot. When
    several fetches have already failed, the error of the earliest kind in
    the order manufacturers, models, categories wins.
    """
    timeout = httpx.Timeout(config.timeout)
    headers = {"User-Agent": config.user_agent, "Accept": "application/json"}

    async with httpx.AsyncClient(timeout=timeout, headers=headers, transport=transport) as client:
        tasks = [
            asyncio.create_task(fetch_records(client, config.manufacturers_url, _MANUFACTURERS)),
            asyncio.create_task(fetch_records(client, config.models_url, _MODELS)),
            asyncio.create_task(fetch_records(client, config.categories_url, _CATEGORIES)),
        ]
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            # also runs when the caller abandons us mid-wait
            unfinished = [task for task in tasks if not task.done()]
            for task in unfinished:
                task.cancel()
            if unfinished:
                await asyncio.gather(*unfinished, return_exceptions=True)

        for task in tasks:
            if not task.cancelled() and task.exception() is not None:
                logger.warning(
                    "Catalog aggregation failed, %d fetch(es) cancelled: %s",
                    len(unfinished), task.exception(),
                )
                raise task.exception()

    manufacturers, models, categories = (task.result() for task in tasks)
    logger.info(
        "Fetched catalog snapshot: %d manufacturers, %d models, %d categories",
        len(manufacturers), len(models), len(categories),
    )
    return Snapshot(manufacturers=manufacturers, categories=categories, car_models=models)
