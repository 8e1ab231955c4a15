from __future__ import annotations
from concurrent.futures import Future, ThreadPoolExecutor, wait as wait_futures
from typing import Callable, Optional, Set, Tuple
import logging
import threading
import pandas as pd
from .api import DiseaseClient
from .config import DashboardConfig
from .data import build_chart_data
from .errors import DataSourceError
from .models import WORLDWIDE, check_kind
from .state import DashboardState, DashboardStore

logger = logging.getLogger(__name__)

class Dashboard:
    """Runs data-source requests in the background and feeds results into the store.

    Requests are never cancelled. Region responses carry the generation handed out
    by the store, which discards anything older than the latest selection.
    """

    def __init__(self, client: DiseaseClient, store: DashboardStore, executor: Optional[ThreadPoolExecutor] = None):
        self.client = client
        self.store = store
        self.executor = executor or ThreadPoolExecutor(max_workers=store.config.max_workers)
        self._pending: Set[Future] = set()
        self._pending_lock = threading.Lock()

    @classmethod
    def from_config(cls, config: DashboardConfig) -> "Dashboard":
        return cls(DiseaseClient.from_config(config), DashboardStore(config))

    @property
    def state(self) -> DashboardState:
        return self.store.state

    def _submit(self, fn: Callable, on_result: Callable, on_error: Callable) -> Future:
        # The store is updated on the worker thread, so a finished future means
        # the result (or the failure) has already been applied.
        def _run() -> None:
            try:
                on_result(fn())
            except DataSourceError as e:
                logger.warning("Data source request failed: %s", e)
                on_error(e)
            except Exception as e:
                logger.exception("Could not apply data source response")
                on_error(e)

        def _done(f: Future) -> None:
            with self._pending_lock:
                self._pending.discard(f)
            if not f.cancelled() and f.exception() is not None:
                logger.error("Unexpected error in background request", exc_info=f.exception())

        future = self.executor.submit(_run)
        with self._pending_lock:
            self._pending.add(future)
        future.add_done_callback(_done)
        return future

    def _fetch_region(self, code: str, generation: int) -> Future:
        fetch = self.client.fetch_global if code == WORLDWIDE else (lambda: self.client.fetch_country(code))
        return self._submit(
            fetch,
            lambda stat: self.store.receive_region_stat(generation, stat),
            lambda e: self.store.fail_request(generation, e),
        )

    def start(self) -> Tuple[Future, Future]:
        """Load worldwide totals and the country list; the two complete in any order."""
        generation = self.store.state.generation
        totals = self._submit(
            self.client.fetch_global,
            lambda stat: self.store.receive_global_stat(generation, stat),
            lambda e: self.store.fail_request(generation, e),
        )
        countries = self._submit(
            self.client.fetch_all_countries,
            self.store.receive_country_list,
            lambda e: self.store.fail_request(None, e),
        )
        return totals, countries

    def choose_region(self, code: str) -> Future:
        generation = self.store.choose_region(code)
        return self._fetch_region(code, generation)

    def choose_statistic(self, kind: str) -> None:
        self.store.choose_statistic(kind)

    def history(self, kind: str = "cases", lastdays: Optional[int] = None) -> pd.DataFrame:
        check_kind(kind)
        days = lastdays or self.store.config.history_days
        return build_chart_data(self.client.fetch_history(days), kind)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until every in-flight request has completed; False on timeout."""
        with self._pending_lock:
            pending = set(self._pending)
        if not pending:
            return True
        _, not_done = wait_futures(pending, timeout=timeout)
        return not not_done

    def close(self) -> None:
        self.executor.shutdown(wait=True)
        self.client.close()
