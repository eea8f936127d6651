# app/data/pricing.py
from ..models.content import PricingTier

PRICING_TIERS: tuple[PricingTier, ...] = (
    PricingTier(
        name="Essential Events",
        price="Starting at $1,999",
        description="Perfect for intimate gatherings, birthday parties, and smaller celebrations.",
        features=(
            "Up to 4 hours of DJ services",
            "Professional sound system (up to 100 guests)",
            "Music consultation & planning",
            "Custom playlist curation",
            "Standard lighting package",
            "Setup & breakdown included",
        ),
    ),
    PricingTier(
        name="Signature Events",
        price="Starting at $3,499",
        description="Ideal for weddings, milestone celebrations, and mid-size corporate events.",
        features=(
            "Up to 6 hours of DJ services",
            "Premium sound system (up to 250 guests)",
            "Full music consultation & planning",
            "Custom playlist curation",
            "Enhanced lighting & effects",
            "MC services included",
            "Wireless microphone for speeches",
            "Early setup & sound check",
        ),
        highlight=True,
    ),
    PricingTier(
        name="Premier & Corporate",
        price="Starting at $4,999",
        description="For large-scale galas, corporate events, fashion shows, and luxury celebrations.",
        features=(
            "Up to 8+ hours of DJ services",
            "Concert-grade sound system",
            "Dedicated event coordinator",
            "Multi-room capability",
            "Professional lighting design",
            "Full MC & hosting services",
            "Backup equipment on-site",
            "Travel available nationwide",
            "Additional musicians/performers on request",
        ),
    ),
)
