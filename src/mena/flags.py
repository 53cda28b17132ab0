"""Flag image URLs on the flagcdn.com CDN.

Pure string formatting; nothing here performs network I/O.

Python 3.13+.
"""

from mena.constants import FLAG_CDN_BASE_URL
from mena.enums import EmojiSize, ImageSize, ImageType

__all__ = ["emoji_url", "image_url", "svg_url"]


def svg_url(code: str) -> str:
    """Vector flag: https://flagcdn.com/{code}.svg"""
    return f"{FLAG_CDN_BASE_URL}/{code.lower()}.svg"


def emoji_url(code: str, size: EmojiSize) -> str:
    """Emoji-sized PNG flag: https://flagcdn.com/{WxH}/{code}.png"""
    return f"{FLAG_CDN_BASE_URL}/{size.value}/{code.lower()}.png"


def image_url(code: str, size: ImageSize, image_type: ImageType = ImageType.JPEG) -> str:
    """Fixed-size raster flag: https://flagcdn.com/{size}/{code}.{ext}

    Example:
        >>> image_url("ps", ImageSize.W160)
        'https://flagcdn.com/w160/ps.jpg'
        >>> image_url("ps", ImageSize.H120, ImageType.PNG)
        'https://flagcdn.com/h120/ps.png'
    """
    return f"{FLAG_CDN_BASE_URL}/{size.value}/{code.lower()}.{image_type.extension}"
