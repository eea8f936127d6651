from .content import PricingTier, Track
from .image import ImagePoolEntry
from .lookup import NOT_FOUND, Found, Lookup, NotFound
from .service_area import City, Hub, HubNotes

__all__ = ["PricingTier", "Track", "ImagePoolEntry", "NOT_FOUND", "Found", "Lookup", "NotFound", "City", "Hub", "HubNotes"]
