from dataclasses import dataclass
from datetime import tzinfo
from typing import Callable, Optional

import requests

from infrastructure.todoist_api import TodoistClient, Transport
from .catalog import Catalog
from .ports import ConfigPort, RowSink
from .task_store import TaskStore
from .tier import TierCache


@dataclass
class Session:
    client: TodoistClient
    catalog: Catalog
    tier: TierCache
    store: TaskStore

    def reload_catalog(self) -> Catalog:
        """Re-read projects and labels into a fresh snapshot."""
        self.catalog = Catalog.load(self.client)
        self.store.catalog = self.catalog
        return self.catalog


def open_session(
    token_provider: Callable[[], Optional[str]],
    sink: RowSink,
    config: ConfigPort,
    http: Optional[requests.Session] = None,
    tz: Optional[tzinfo] = None,
) -> Session:
    """Wire the client stack and load the per-session project/label snapshot."""
    client = TodoistClient(Transport(token_provider, session=http))
    catalog = Catalog.load(client)
    tier = TierCache(client.is_premium, token_provider)
    store = TaskStore(client, catalog, tier, sink, config, tz=tz)
    return Session(client=client, catalog=catalog, tier=tier, store=store)


__all__ = ["Session", "open_session"]
