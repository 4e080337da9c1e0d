"""
Event Data Source - Excellence Eligibility
excellence/services/event_data_source.py

Seam between the eligibility engine and whatever fetches event data.
Remote clients implement EventDataSource; InMemoryEventDataSource serves
snapshots that were captured or built elsewhere.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from excellence.config import Settings
from excellence.core.exceptions import (
    DataSourceAuthenticationException,
    EventNotFoundException,
)
from excellence.models.event import EventSnapshot

logger = logging.getLogger(__name__)


class EventDataSource(ABC):
    """Supplies immutable EventSnapshots by event code (SKU)."""

    def __init__(self, settings: Settings):
        # Credentials travel with the instance, never through module state
        self.settings = settings

    def bearer_token(self) -> str:
        """
        Token for authenticated remote sources.

        Subclasses that call a credentialed API use this before each request;
        InMemoryEventDataSource never does. Raises
        DataSourceAuthenticationException when no token is configured.
        """
        token = self.settings.ROBOTEVENTS_TOKEN
        if token is None or not token.get_secret_value():
            raise DataSourceAuthenticationException("ROBOTEVENTS_TOKEN is not configured")
        return token.get_secret_value()

    @abstractmethod
    def get_event(self, sku: str) -> EventSnapshot:
        """Return the current snapshot for `sku` or raise EventNotFoundException."""


class InMemoryEventDataSource(EventDataSource):
    """Data source backed by snapshots held in memory."""

    def __init__(
        self,
        settings: Settings,
        snapshots: Optional[Iterable[EventSnapshot]] = None,
    ):
        super().__init__(settings)
        self._snapshots: Dict[str, EventSnapshot] = {}
        for snapshot in snapshots or []:
            self.put(snapshot)

    def put(self, snapshot: EventSnapshot) -> None:
        """Store or replace the snapshot for its SKU."""
        self._snapshots[snapshot.sku] = snapshot
        logger.info("Stored snapshot for %s (%d teams)", snapshot.sku, len(snapshot.teams))

    def get_event(self, sku: str) -> EventSnapshot:
        snapshot = self._snapshots.get(sku)
        if snapshot is None:
            raise EventNotFoundException(sku)
        return snapshot

    def list_skus(self) -> List[str]:
        return sorted(self._snapshots)
