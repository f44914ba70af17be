"""Car condition value object."""

from enum import Enum


class Condition(str, Enum):
    """Condition of a car in the inventory."""

    NEW = "NEW"
    USED = "USED"
