from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional
import pandas as pd
import numpy as np
import country_converter as coco

_cc = coco.CountryConverter()

NOT_FOUND = "not found"
_UNITS = ((1, ""), (10**3, "k"), (10**6, "m"), (10**9, "b"), (10**12, "t"))
_TENTH = Decimal("0.1")

def to_iso3(iso2_series: pd.Series) -> pd.Series:
    codes = [x for x in iso2_series.dropna().unique() if isinstance(x, str) and x]
    if not codes:
        return pd.Series(np.nan, index=iso2_series.index, dtype="object")
    converted = _cc.convert(names=codes, src="ISO2", to="ISO3", not_found=NOT_FOUND)
    if isinstance(converted, str):
        converted = [converted]
    lookup = {k: v for k, v in zip(codes, converted) if v != NOT_FOUND}
    return iso2_series.map(lookup)

def compact(n: Optional[float]) -> str:
    """Abbreviate a count to one decimal place: 1500 -> '1.5k', 2300000 -> '2.3m'.

    The unit is picked again after rounding, so 999950 gives '1.0m' rather than '1000.0k'.
    """
    value = Decimal(str(n or 0))
    i = 0
    for j, (scale, _) in enumerate(_UNITS):
        if abs(value) >= scale:
            i = j
    while True:
        scaled = (value / _UNITS[i][0]).quantize(_TENTH, rounding=ROUND_HALF_UP)
        if abs(scaled) < 1000 or i == len(_UNITS) - 1:
            return f"{scaled}{_UNITS[i][1]}"
        i += 1

def pretty_print_stat(n: Optional[float]) -> str:
    return f"+{compact(n)}" if n else "+0"

def thousands(n: Optional[float]) -> str:
    return f"{int(n or 0):,}"
