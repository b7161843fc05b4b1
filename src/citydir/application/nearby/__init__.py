"""Application nearby – area aggregation."""
from citydir.application.nearby.service import NearbyData, NearbyService

__all__ = ["NearbyData", "NearbyService"]
