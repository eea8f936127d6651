# app/models/image.py
from dataclasses import dataclass


@dataclass(frozen=True)
class ImagePoolEntry:
    src: str
    alt_base: str

    def absolute_src(self, site_url: str) -> str:
        if self.src.startswith("http"):
            return self.src
        return f"{site_url.rstrip('/')}{self.src}"
