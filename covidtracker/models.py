from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from .errors import DataSourceError

WORLDWIDE = "worldwide"
STAT_KINDS = ("cases", "recovered", "deaths")

def check_kind(kind: str) -> str:
    if kind not in STAT_KINDS:
        raise ValueError(f"Unknown statistic '{kind}'. Expected one of {', '.join(STAT_KINDS)}.")
    return kind

def _counter(payload: Mapping[str, Any], key: str, required: bool = False) -> int:
    value = payload.get(key)
    if value is None:
        if required:
            raise DataSourceError(f"Payload is missing '{key}'.")
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise DataSourceError(f"Field '{key}' is not numeric: {value!r}") from e

def _degrees(info: Mapping[str, Any], key: str) -> Optional[float]:
    value = info.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise DataSourceError(f"Coordinate '{key}' is not numeric: {value!r}") from e

def _counters(payload: Any) -> Dict[str, int]:
    if not isinstance(payload, Mapping):
        raise DataSourceError(f"Expected a JSON object, got {type(payload).__name__}.")
    return {
        "cases": _counter(payload, "cases", required=True),
        "today_cases": _counter(payload, "todayCases"),
        "recovered": _counter(payload, "recovered"),
        "today_recovered": _counter(payload, "todayRecovered"),
        "deaths": _counter(payload, "deaths"),
        "today_deaths": _counter(payload, "todayDeaths"),
    }

@dataclass(frozen=True)
class GlobalStat:
    cases: int
    today_cases: int
    recovered: int
    today_recovered: int
    deaths: int
    today_deaths: int
    updated: Optional[int] = None

    @classmethod
    def from_json(cls, payload: Any) -> "GlobalStat":
        counters = _counters(payload)
        return cls(updated=payload.get("updated"), **counters)

@dataclass(frozen=True)
class CountryStat:
    country: str
    iso2: Optional[str]
    lat: Optional[float]
    long: Optional[float]
    cases: int
    today_cases: int
    recovered: int
    today_recovered: int
    deaths: int
    today_deaths: int
    updated: Optional[int] = None

    @classmethod
    def from_json(cls, payload: Any) -> "CountryStat":
        counters = _counters(payload)
        if not payload.get("country"):
            raise DataSourceError("Country payload is missing 'country'.")
        info = payload.get("countryInfo")
        if info is None:
            info = {}
        elif not isinstance(info, Mapping):
            raise DataSourceError(f"countryInfo for {payload['country']!r} is not an object.")
        return cls(
            country=str(payload["country"]),
            iso2=info.get("iso2") or None,
            lat=_degrees(info, "lat"),
            long=_degrees(info, "long"),
            updated=payload.get("updated"),
            **counters,
        )

    @property
    def coordinate(self) -> Optional[Tuple[float, float]]:
        if self.lat is None or self.long is None:
            return None
        return (float(self.lat), float(self.long))

Stat = Union[GlobalStat, CountryStat]

@dataclass(frozen=True)
class CountryOption:
    name: str
    value: str

@dataclass(frozen=True)
class MapView:
    center: Tuple[float, float]
    zoom: int

def total(stat: Stat, kind: str) -> int:
    return getattr(stat, check_kind(kind))

def today(stat: Stat, kind: str) -> int:
    return getattr(stat, f"today_{check_kind(kind)}")
