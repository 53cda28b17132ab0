"""Dataset validation.

Python 3.13+.
"""

from .dataset import validate_dataset

__all__ = ["validate_dataset"]
