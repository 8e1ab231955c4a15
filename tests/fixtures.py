"""Sample payloads shaped like the disease.sh v3 responses."""

GLOBAL_PAYLOAD = {
    "updated": 1700000000000,
    "cases": 700000000, "todayCases": 1200,
    "deaths": 6900000, "todayDeaths": 15,
    "recovered": 670000000, "todayRecovered": 900,
}

def country_payload(name, iso2, cases, lat=10.0, long=20.0, **extra):
    payload = {
        "updated": 1700000000000,
        "country": name,
        "countryInfo": {"_id": 1, "iso2": iso2, "iso3": None, "lat": lat, "long": long},
        "cases": cases, "todayCases": 3,
        "deaths": cases // 100, "todayDeaths": 0,
        "recovered": cases // 2, "todayRecovered": 1,
    }
    payload.update(extra)
    return payload

COUNTRIES_PAYLOAD = [
    country_payload("USA", "US", 1500, lat=38.0, long=-97.0),
    country_payload("France", "FR", 500, lat=46.0, long=2.0),
    country_payload("Diamond Princess", None, 712, lat=35.44, long=139.64),
    country_payload("Germany", "DE", 1500, lat=51.0, long=9.0),
]

HISTORY_PAYLOAD = {
    "cases": {"1/1/23": 100, "1/2/23": 150, "1/3/23": 175},
    "deaths": {"1/1/23": 10, "1/2/23": 12, "1/3/23": 12},
    "recovered": {"1/1/23": 0, "1/2/23": 0, "1/3/23": 0},
}
