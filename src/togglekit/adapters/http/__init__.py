"""HTTP adapter – async httpx-backed lookup services."""
from togglekit.adapters.http.location import HttpLocationProvider

__all__ = ["HttpLocationProvider"]
