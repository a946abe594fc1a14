from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class InterestStatus(str, Enum):
    INTERESTED = "Interested"
    VIEWED = "Viewed"


@dataclass(frozen=True, slots=True)
class ActivityItem:
    """One entry of a view or compare history."""

    car_id: str
    timestamp: datetime


@dataclass(frozen=True, slots=True)
class BuyInterest:
    """A buyer's one-time signal of intent for a car."""

    car_id: str
    timestamp: datetime
    status: InterestStatus = InterestStatus.INTERESTED
