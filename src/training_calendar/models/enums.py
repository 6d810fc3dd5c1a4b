"""Enumerations and fixed constants for the training calendar.

Tier fallback chains and weekday keys are part of the published data
contract and must not be reordered.
"""

from enum import Enum, IntEnum


class Tier(str, Enum):
    """Prescribed difficulty tiers an athlete can be assigned to."""

    MED = "MED"
    LRG = "LRG"
    XL = "XL"


class WorkoutStatus(str, Enum):
    """Lifecycle status of a workout version."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Weekday(IntEnum):
    """ISO weekday numbering (Monday = 1) with the dataset's day keys."""

    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5
    SAT = 6
    SUN = 7

    @property
    def key(self) -> str:
        """Lowercase key used in ``Week.workouts`` (e.g. ``"mon"``)."""
        return self.name.lower()

    @property
    def label(self) -> str:
        """Short label (e.g. ``"Mon"``)."""
        return self.name.title()


# Weekday keys in calendar order
DAY_KEYS: tuple[str, ...] = tuple(day.key for day in Weekday)

# Fallback chain per requested tier; first tier present on the workout wins
TIER_FALLBACK_ORDER: dict[Tier, tuple[Tier, ...]] = {
    Tier.MED: (Tier.MED, Tier.LRG, Tier.XL),
    Tier.LRG: (Tier.LRG, Tier.MED, Tier.XL),
    Tier.XL: (Tier.XL, Tier.LRG, Tier.MED),
}

# Intensity anchor bounds for a single interval (inclusive)
INTENSITY_ANCHOR_MIN = 1
INTENSITY_ANCHOR_MAX = 10

# Length of a plan week in calendar days
DAYS_PER_WEEK = 7

DEFAULT_TIME_ZONE = "America/Los_Angeles"
DEFAULT_WEEK_START = Weekday.MON
