from __future__ import annotations
from typing import Any, Iterable, List, Mapping, Sequence
import pandas as pd
import numpy as np
from .models import CountryOption, CountryStat, check_kind
from .utils import to_iso3

CASES_TYPE_COLORS = {
    "cases": {"hex": "#CC1034", "multiplier": 800},
    "recovered": {"hex": "#7dd71d", "multiplier": 1200},
    "deaths": {"hex": "#fb4443", "multiplier": 2000},
}

def build_options(stats: Iterable[CountryStat]) -> List[CountryOption]:
    """Dropdown entries for every country that carries an ISO code, in input order."""
    seen = set()
    out = []
    for s in stats:
        if s.iso2 is None or s.iso2 in seen:
            continue
        seen.add(s.iso2)
        out.append(CountryOption(name=s.country, value=s.iso2))
    return out

def sort_by_cases(stats: Iterable[CountryStat]) -> List[CountryStat]:
    # sorted() is stable, so equal counts keep their upstream order
    return sorted(stats, key=lambda s: s.cases, reverse=True)

def table_frame(stats: Iterable[CountryStat]) -> pd.DataFrame:
    rows = [{"country": s.country, "cases": s.cases} for s in sort_by_cases(stats)]
    return pd.DataFrame(rows, columns=["country", "cases"])

def map_frame(stats: Sequence[CountryStat], kind: str = "cases") -> pd.DataFrame:
    check_kind(kind)
    rows = [
        {"country": s.country, "iso2": s.iso2, "lat": s.lat, "long": s.long, kind: getattr(s, kind)}
        for s in stats
        if s.coordinate is not None
    ]
    df = pd.DataFrame(rows, columns=["country", "iso2", "lat", "long", kind])
    df["iso3"] = to_iso3(df["iso2"])
    multiplier = CASES_TYPE_COLORS[kind]["multiplier"]
    df["radius"] = np.sqrt(df[kind].astype(float)) * multiplier
    return df

def build_chart_data(history: Mapping[str, Mapping[str, Any]], kind: str = "cases") -> pd.DataFrame:
    """Day-over-day new counts from a cumulative time series; the first day is dropped."""
    check_kind(kind)
    series = history.get(kind) or {}
    if not series:
        return pd.DataFrame(columns=["date", "new"])
    s = pd.Series(series, dtype="float64")
    s.index = pd.to_datetime(s.index, format="%m/%d/%y")
    new = s.diff().iloc[1:]
    return pd.DataFrame({"date": new.index, "new": new.values.astype("int64")})
