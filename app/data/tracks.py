# app/data/tracks.py
from ..models.content import Track

TRACKS: tuple[Track, ...] = (
    Track(
        id="1",
        title="Miles Morales Mix Vol. 1",
        description="A showcase of versatility, blending genres and decades into one seamless experience.",
        src="/static/audio/MUSIC--milesmorales.mp3",
    ),
    Track(
        id="2",
        title="Miles Morales Mix Vol. 2",
        description="From corporate events to the club. Hear the range that makes Miles one of the best.",
        src="/static/audio/MUSIC--milesmorales (1).mp3",
    ),
)

# EPK uses the same mixes
EPK_TRACKS = TRACKS
