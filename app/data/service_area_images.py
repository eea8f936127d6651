# app/data/service_area_images.py
"""
Photo pool for service-area pages.

Pages address the pool by index, so entries must only ever be appended.
"""
from ..models.image import ImagePoolEntry

SERVICE_AREA_IMAGES: tuple[ImagePoolEntry, ...] = (
    ImagePoolEntry("https://images.bestroi.media/miles-morales/DSC_0464%202.avif", "DJ setup with professional lighting"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/Facetune_14-12-2025-10-45-12.avif", "DJ Miles Morales performing"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/IMG_1338.avif", "DJ booth with sound system"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/IMG_4879.avif", "Professional DJ equipment setup"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/IMG_5089.avif", "Wedding DJ setup with uplighting"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/IMG_6309.avif", "DJ mixing at event"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/IMG_6352.avif", "DJ performance with crowd"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/Koran%20%281%29.avif", "DJ Miles Morales at turntables"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image0.avif", "Corporate event DJ setup"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image1.avif", "DJ booth with professional sound"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image10.avif", "Event DJ with lighting effects"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image11.avif", "DJ setup at party venue"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image12.avif", "Professional DJ equipment"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image13.avif", "DJ mixing console"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image16.avif", "DJ performance setup"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image17.avif", "Event DJ with sound system"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image2.avif", "Club DJ setup"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image20.avif", "DJ booth with stage lighting"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image21.avif", "Professional DJ services"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image22.avif", "DJ equipment and turntables"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image4.avif", "Wedding reception DJ"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image5.avif", "Corporate event DJ services"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image6.avif", "DJ setup with microphones"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image7.avif", "Party DJ with lighting"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image8.avif", "Event DJ performance"),
    ImagePoolEntry("https://images.bestroi.media/miles-morales/image9.avif", "Professional DJ booth setup"),
)

# Hand-picked pool indices for the hub pages so no two hubs share a photo.
HUB_IMAGE_ASSIGNMENTS: dict[str, int] = {
    "chambersburg-pa": 0,
    "washington-dc": 1,
    "baltimore-md": 2,
    "philadelphia-pa": 3,
    "pittsburgh-pa": 4,
}
