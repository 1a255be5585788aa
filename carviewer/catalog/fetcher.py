from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ..errors import DecodeError, FetchError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def fetch_records(client: httpx.AsyncClient, url: str, shape: TypeAdapter[T]) -> T:
    """
    GET ``url`` and decode the full body into ``shape``.

    The status code is not inspected: whatever body the source returns is
    handed to the decoder, so an error page surfaces as a ``DecodeError``.
    Connection failures, timeouts and unreadable bodies raise ``FetchError``.
    """
    try:
        response = await client.get(url)
        body = response.content
    except httpx.TimeoutException as e:
        logger.warning("Timed out fetching %s", url)
        raise FetchError(url, f"timed out ({e.__class__.__name__})") from e
    except httpx.HTTPError as e:
        logger.warning("Failed to fetch data from %s: %s", url, e)
        raise FetchError(url, str(e) or e.__class__.__name__) from e

    logger.debug("Fetched %s -> HTTP %s, %d bytes", url, response.status_code, len(body))

    try:
        payload: Any = json.loads(body)
        return shape.validate_python(payload)
    except (ValueError, ValidationError) as e:
        logger.warning("Failed to decode payload from %s: %s", url, e)
        raise DecodeError(url, str(e)) from e
