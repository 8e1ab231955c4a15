"""Single-owner selection store for the dashboard.

Every mutation goes through one of the action methods below. Region fetches are
tagged with a generation number; a response whose generation is no longer current
is dropped, so the last region the user picked always wins.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple
import logging
import threading
from .config import DEFAULT_WORLD_CENTER, DashboardConfig
from .data import build_options, sort_by_cases
from .errors import UnknownRegionError
from .models import WORLDWIDE, CountryOption, CountryStat, GlobalStat, MapView, Stat, check_kind

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class DashboardState:
    region: str = WORLDWIDE
    statistic: str = "cases"
    snapshot: Optional[Stat] = None
    countries: Tuple[CountryStat, ...] = ()
    options: Tuple[CountryOption, ...] = ()
    table: Tuple[CountryStat, ...] = ()
    map_view: MapView = MapView(DEFAULT_WORLD_CENTER, 3)
    stale: bool = False
    last_error: Optional[str] = None
    generation: int = 0

class DashboardStore:
    def __init__(self, config: Optional[DashboardConfig] = None):
        self.config = config or DashboardConfig()
        self._lock = threading.Lock()
        self._state = DashboardState(map_view=self._world_view())

    @property
    def state(self) -> DashboardState:
        with self._lock:
            return self._state

    def _world_view(self) -> MapView:
        return MapView(tuple(self.config.world_center), self.config.world_zoom)

    def choose_region(self, code: str) -> int:
        """Select a region and return the generation its fetch must carry."""
        with self._lock:
            if code != WORLDWIDE and code not in {o.value for o in self._state.options}:
                raise UnknownRegionError(f"Unknown region '{code}'.")
            generation = self._state.generation + 1
            self._state = replace(self._state, region=code, generation=generation)
        logger.info("Region selected: %s (generation %d)", code, generation)
        return generation

    def choose_statistic(self, kind: str) -> None:
        check_kind(kind)
        with self._lock:
            self._state = replace(self._state, statistic=kind)

    def receive_region_stat(self, generation: int, stat: Stat) -> bool:
        with self._lock:
            if generation != self._state.generation:
                logger.debug("Dropping stale response (generation %d, current %d)", generation, self._state.generation)
                return False
            if isinstance(stat, GlobalStat):
                view = self._world_view()
            elif stat.coordinate is not None:
                view = MapView(stat.coordinate, self.config.country_zoom)
            else:
                view = self._state.map_view
            self._state = replace(self._state, snapshot=stat, map_view=view, stale=False, last_error=None)
            return True

    def receive_global_stat(self, generation: int, stat: GlobalStat) -> bool:
        return self.receive_region_stat(generation, stat)

    def receive_country_list(self, stats) -> None:
        stats = tuple(stats)
        options = tuple(build_options(stats))
        table = tuple(sort_by_cases(stats))
        with self._lock:
            self._state = replace(self._state, countries=stats, options=options, table=table)
        logger.info("Loaded %d countries (%d selectable)", len(stats), len(options))

    def fail_request(self, generation: Optional[int], error: BaseException) -> None:
        """Flag the displayed data as stale; the previous snapshot and map view stay."""
        with self._lock:
            if generation is not None and generation != self._state.generation:
                return
            self._state = replace(self._state, stale=True, last_error=str(error))
