class DataSourceError(RuntimeError):
    """Upstream statistics service failed: network, HTTP status, JSON or payload shape."""

class UnknownRegionError(ValueError):
    """Region is neither 'worldwide' nor a code from the loaded country list."""
