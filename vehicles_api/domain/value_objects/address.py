"""Address value object."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Address:
    """Human-readable address resolved from coordinates."""

    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
