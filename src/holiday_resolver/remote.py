"""
Flat holiday list loaded from a remote server.

A simpler lookup mode without rule projection: pre-computed lists of
{date, name} entries are fetched once per country and year, then queried
in memory. A year that cannot be fetched degrades to an empty list.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from datetime import date
from typing import Optional

import httpx
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from . import config
from .errors import HolidayConfigurationError, HolidayNotInitializedError
from .holidays import DateLike, to_date

logger = logging.getLogger(__name__)


class HolidayEntry(BaseModel):
    """One pre-computed holiday."""
    day: date = Field(alias="date")
    name: str


_ENTRIES = TypeAdapter(list[HolidayEntry])


class RemoteHolidayList:
    """Holiday list fetched from `<base_url>/<country>/<year>/holidays.json`."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/") if base_url else config.holidays_url()
        self._transport = transport
        self._timeout = timeout
        self._holidays: dict[date, str] = {}
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self, country: str, years: int | Iterable[int]) -> bool:
        """Fetch the lists of all years concurrently and cache them."""
        if not self.base_url:
            raise HolidayConfigurationError("HOLIDAYS_URL is not configured")

        year_list = [years] if isinstance(years, int) else list(years)
        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
            lists = await asyncio.gather(
                *(self._load_year(client, country.lower(), y) for y in year_list)
            )

        self._holidays = {}
        for entries in lists:
            for entry in entries:
                self._holidays.setdefault(entry.day, entry.name)

        self._initialized = True
        logger.info(
            "Loaded %d remote holidays for %s %s", len(self._holidays), country, year_list
        )
        return True

    async def _load_year(
        self, client: httpx.AsyncClient, country: str, year: int
    ) -> list[HolidayEntry]:
        url = f"{self.base_url}/{country}/{year}/holidays.json"
        try:
            response = await client.get(url)
            response.raise_for_status()
            return _ENTRIES.validate_json(response.content)
        except (httpx.HTTPError, ValidationError) as e:
            logger.error(
                "Failed to load holidays for %s/%d from %s: %s (using empty list)",
                country, year, url, e,
            )
            return []

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise HolidayNotInitializedError("Call initialize() before querying holidays")

    def is_holiday(self, d: DateLike) -> bool:
        """Checks if date is in the loaded list."""
        self._require_initialized()
        return to_date(d) in self._holidays

    def get_holiday_name(self, d: DateLike) -> Optional[str]:
        """Returns holiday name or None."""
        self._require_initialized()
        return self._holidays.get(to_date(d))
