"""Static region dataset.

ALL_REGIONS is the master collection: MIDDLE_EAST followed by NORTH_AFRICA,
in declaration order. All three are tuples of frozen Region records and are
safe to share across threads.

Python 3.13+.
"""

from mena.models import Region

from .middle_east import MIDDLE_EAST
from .north_africa import NORTH_AFRICA

__all__ = ["ALL_REGIONS", "MIDDLE_EAST", "NORTH_AFRICA"]

ALL_REGIONS: tuple[Region, ...] = MIDDLE_EAST + NORTH_AFRICA
