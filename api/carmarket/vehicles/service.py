"""
Vehicle search by budget.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from fastapi import status

from carmarket.core.db import DatabaseError
from carmarket.core.errors import http_error
from carmarket.storage.base import MarketStore

logger = logging.getLogger(__name__)

# Leading integer with optional sign; anything after the digits is ignored.
_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")

# Far above any storable price; longer inputs are clamped to this magnitude.
MAX_BUDGET_DIGITS = 18
BUDGET_LIMIT = 10**MAX_BUDGET_DIGITS


def parse_budget(raw: str | None) -> int | None:
    """
    Read the leading integer of `raw` ("1500abc" -> 1500, "12.9" -> 12).
    Returns None when there is none. Magnitudes beyond `BUDGET_LIMIT` are
    clamped, which leaves the `price <= budget` result unchanged.
    """
    match = _LEADING_INT.match(raw or "")
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    value = BUDGET_LIMIT if len(digits) > MAX_BUDGET_DIGITS else int(digits)
    return -value if sign == "-" else value


async def search_by_budget(store: MarketStore, raw_budget: str | None) -> dict[str, Any]:
    budget = parse_budget(raw_budget)
    if budget is None:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Invalid budget parameter")

    try:
        rows = await store.search_vehicles(max_price=budget)
    except DatabaseError as exc:
        logger.exception("vehicle_search_failed budget=%s", budget)
        raise http_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database query failed", str(exc)) from exc

    return {"message": "success", "data": rows}
