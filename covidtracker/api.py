from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging
import requests
from .config import DashboardConfig
from .errors import DataSourceError
from .models import CountryStat, GlobalStat

logger = logging.getLogger(__name__)

class DiseaseClient:
    """Read-only client for the disease.sh COVID-19 endpoints."""

    def __init__(self, base_url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: DashboardConfig) -> "DiseaseClient":
        return cls(config.api_base_url, timeout=config.timeout)

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise DataSourceError(f"Request to {url} failed: {e}") from e
        try:
            return resp.json()
        except ValueError as e:
            raise DataSourceError(f"Malformed JSON from {url}") from e

    def fetch_global(self) -> GlobalStat:
        return GlobalStat.from_json(self._get("all"))

    def fetch_all_countries(self) -> List[CountryStat]:
        data = self._get("countries")
        if not isinstance(data, list):
            raise DataSourceError(f"Expected a list of countries, got {type(data).__name__}.")
        stats = []
        for item in data:
            try:
                stats.append(CountryStat.from_json(item))
            except DataSourceError as e:
                logger.warning("Skipping malformed country entry: %s", e)
        return stats

    def fetch_country(self, code: str) -> CountryStat:
        if not code:
            raise DataSourceError("Country code must not be empty.")
        return CountryStat.from_json(self._get(f"countries/{code}"))

    def fetch_history(self, lastdays: int = 120) -> Dict[str, Dict[str, int]]:
        data = self._get("historical/all", params={"lastdays": lastdays})
        if not isinstance(data, dict):
            raise DataSourceError(f"Expected a historical mapping, got {type(data).__name__}.")
        return data

    def close(self) -> None:
        self.session.close()
