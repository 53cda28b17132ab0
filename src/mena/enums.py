"""Enumerations for mena type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "EmojiSize",
    "ImageSize",
    "ImageType",
    "LocaleTag",
]


class LocaleTag(StrEnum):
    """Display locale supported by the dataset.

    StrEnum provides automatic string conversion: str(LocaleTag.AR) == "ar"
    """

    EN = "en"
    """English. Latin script, left-to-right."""

    AR = "ar"
    """Arabic. Arabic script, right-to-left."""


class ImageType(StrEnum):
    """Raster format for flag images.

    The value is the file extension used by the CDN.
    """

    PNG = "png"
    """Lossless, supports transparency."""

    JPEG = "jpg"
    """Lossy, compressed."""

    @property
    def extension(self) -> str:
        """File extension without the leading dot."""
        return self.value

    @property
    def supports_transparency(self) -> bool:
        return self is ImageType.PNG

    @property
    def is_lossless(self) -> bool:
        return self is ImageType.PNG

    @property
    def is_lossy(self) -> bool:
        return self is ImageType.JPEG

    @property
    def description(self) -> str:
        """Human-readable label, e.g. 'PNG format'."""
        return f"{self.value.upper()} format"

    @property
    def characteristics(self) -> str:
        match self:
            case ImageType.PNG:
                return "Lossless, Transparency"
            case ImageType.JPEG:
                return "Lossy, Compressed"


class ImageSize(StrEnum):
    """Fixed-dimension flag image size.

    Width-based sizes (wNNN) fix the width; height-based sizes (hNNN) fix the
    height. The other dimension follows the 4:3 flag aspect ratio.

    Size categories are based on the width:
        small <= 80 < medium <= 320 < large <= 640 < extra large
    """

    # Width-based sizes
    W20 = "w20"
    W40 = "w40"
    W80 = "w80"
    W160 = "w160"
    W320 = "w320"
    W640 = "w640"
    W1280 = "w1280"
    W2560 = "w2560"

    # Height-based sizes
    H20 = "h20"
    H24 = "h24"
    H40 = "h40"
    H60 = "h60"
    H80 = "h80"
    H120 = "h120"
    H240 = "h240"

    @property
    def size_param(self) -> str:
        """Path segment used by the CDN (same as the value)."""
        return self.value

    @property
    def is_width_based(self) -> bool:
        return self.value.startswith("w")

    @property
    def is_height_based(self) -> bool:
        return self.value.startswith("h")

    @property
    def _pixels(self) -> int:
        return int(self.value[1:])

    @property
    def width(self) -> int:
        if self.is_width_based:
            return self._pixels
        return round(self._pixels * 4 / 3)

    @property
    def height(self) -> int:
        if self.is_height_based:
            return self._pixels
        return round(self._pixels * 3 / 4)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def dimensions(self) -> str:
        """Pixel dimensions as 'WxH', e.g. '160x120'."""
        return f"{self.width}x{self.height}"

    @property
    def description(self) -> str:
        return f"{self.dimensions} pixels"

    @property
    def is_small(self) -> bool:
        return self.width <= 80

    @property
    def is_medium(self) -> bool:
        return 80 < self.width <= 320

    @property
    def is_large(self) -> bool:
        return 320 < self.width <= 640

    @property
    def is_extra_large(self) -> bool:
        return self.width > 640


class EmojiSize(StrEnum):
    """Emoji-style flag size, value is 'WxH' as used by the CDN path.

    Size categories are based on the width:
        small <= 32 < medium <= 64 < large <= 128 < extra large
    """

    SIZE_16X12 = "16x12"
    SIZE_20X15 = "20x15"
    SIZE_24X18 = "24x18"
    SIZE_28X21 = "28x21"
    SIZE_32X24 = "32x24"
    SIZE_36X27 = "36x27"
    SIZE_40X30 = "40x30"
    SIZE_48X36 = "48x36"
    SIZE_56X42 = "56x42"
    SIZE_60X45 = "60x45"
    SIZE_64X48 = "64x48"
    SIZE_72X54 = "72x54"
    SIZE_80X60 = "80x60"
    SIZE_84X63 = "84x63"
    SIZE_96X72 = "96x72"
    SIZE_108X81 = "108x81"
    SIZE_112X84 = "112x84"
    SIZE_120X90 = "120x90"
    SIZE_128X96 = "128x96"
    SIZE_144X108 = "144x108"
    SIZE_160X120 = "160x120"
    SIZE_192X144 = "192x144"
    SIZE_224X168 = "224x168"
    SIZE_256X192 = "256x192"

    @property
    def dimensions(self) -> str:
        return self.value

    @property
    def width(self) -> int:
        return int(self.value.split("x")[0])

    @property
    def height(self) -> int:
        return int(self.value.split("x")[1])

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def description(self) -> str:
        return f"{self.value} pixels"

    @property
    def is_small(self) -> bool:
        return self.width <= 32

    @property
    def is_medium(self) -> bool:
        return 32 < self.width <= 64

    @property
    def is_large(self) -> bool:
        return 64 < self.width <= 128

    @property
    def is_extra_large(self) -> bool:
        return self.width > 128
