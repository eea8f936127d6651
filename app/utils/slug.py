# app/utils/slug.py
import re
import struct

_HASH_SEED = 5381
_MASK_32 = 0xFFFFFFFF


def slugify(text: str) -> str:
    """
    Lowercase, drop punctuation, collapse spaces/underscores/hyphens into one hyphen.
    "Fort Loudon" -> "fort-loudon"
    """
    s = (text or "").strip().lower()
    s = re.sub(r"[^\w\s-]", "", s, flags=re.ASCII)
    s = re.sub(r"[\s_-]+", "-", s)
    return s.strip("-")


def _to_int32(n: int) -> int:
    n &= _MASK_32
    return n - (1 << 32) if n & 0x80000000 else n


def hash_slug(slug: str) -> int:
    """
    djb2 over the UTF-16 code units of ``slug`` with signed 32-bit wraparound.

    Returns a non-negative int. Every step is masked to 32 bits so the result
    matches image assignments generated by the previous JavaScript site.
    """
    h = _HASH_SEED
    for (unit,) in struct.iter_unpack("<H", slug.encode("utf-16-le", "surrogatepass")):
        h = _to_int32(h * 33 + unit)
    return abs(h)
