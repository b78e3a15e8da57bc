"""
Loader Base

Shared fetch step and state tracking for the tabular loaders. Each loader
performs exactly one awaited HTTP fetch; nothing is retried, deduplicated or
cancelled here.
"""

from enum import Enum
from typing import Optional
import logging

import httpx

from ..config import get_settings
from ..data.tabular import TabularRecords, parse_tabular
from ..exceptions import FetchError, InvalidConfiguration

logger = logging.getLogger(__name__)


class LoaderState(str, Enum):
    """Loader lifecycle states."""
    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


async def fetch_text(url: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """
    Fetch a tabular resource as text.

    Args:
        url: Resource location
        client: Client to reuse; a short-lived one is created otherwise

    Returns:
        Decoded response body

    Raises:
        FetchError: On a non-success status or a transport failure
    """
    try:
        if client is not None:
            response = await client.get(url)
        else:
            async with httpx.AsyncClient(timeout=get_settings().fetch_timeout) as own_client:
                response = await own_client.get(url)
    except httpx.HTTPError as e:
        raise FetchError(None, url, str(e)) from e

    if not response.is_success:
        raise FetchError(response.status_code, url, response.reason_phrase)
    return response.text


class TabularLoader:
    """Common fetch-parse-populate flow; subclasses implement ``_populate``."""

    def __init__(self, url: str, client: Optional[httpx.AsyncClient] = None):
        self.url = url
        self.client = client
        self._state = LoaderState.UNCONFIGURED
        self._started = False

    @property
    def is_configured(self) -> bool:
        raise NotImplementedError

    @property
    def state(self) -> LoaderState:
        if self._state == LoaderState.UNCONFIGURED and self.is_configured:
            return LoaderState.CONFIGURED
        return self._state

    def _check_ready(self) -> None:
        """Raise before any I/O if this loader cannot run."""
        if self._started:
            raise InvalidConfiguration(f"loader for {self.url} has already been used")
        self._validate_configuration()

    def _validate_configuration(self) -> None:
        raise NotImplementedError

    def _populate(self, records: TabularRecords):
        raise NotImplementedError

    async def load(self):
        """
        Fetch the resource and populate the bound series.

        Raises:
            InvalidConfiguration: If the loader is incomplete or already used
            FetchError: If the resource could not be fetched
            EmptyResource: If the resource has no non-blank line
            MissingColumn: If a configured column is not in the header
        """
        self._check_ready()
        self._started = True
        self._state = LoaderState.LOADING
        logger.info(f"Loading tabular data from {self.url}")
        try:
            text = await fetch_text(self.url, self.client)
        except FetchError as e:
            self._state = LoaderState.FAILED
            logger.error(f"Load aborted: {e}")
            raise
        return self._run(text)

    def load_text(self, text: str):
        """Populate the bound series from text already in hand."""
        self._check_ready()
        self._started = True
        self._state = LoaderState.LOADING
        return self._run(text)

    def _run(self, text: str):
        try:
            records = parse_tabular(text, self.url)
            result = self._populate(records)
        except Exception as e:
            self._state = LoaderState.FAILED
            logger.error(f"Load of {self.url} failed: {e}")
            raise
        self._state = LoaderState.LOADED
        return result
