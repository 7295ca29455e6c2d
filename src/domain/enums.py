"""Domain enumerations: pace ranges, availability levels, listing fields."""

import enum


class PaceRange(str, enum.Enum):
    """Minutes-per-mile bands a seeker can search by."""

    SUB_8 = "sub_8"
    EIGHT_TO_NINE = "8_to_9"
    NINE_TO_TEN = "9_to_10"
    TEN_PLUS = "10_plus"


class AvailabilityLevel(str, enum.Enum):
    """How often a pace range is represented at a run, best first."""

    CONSISTENTLY = "consistently"
    FREQUENTLY = "frequently"
    SOMETIMES = "sometimes"
    RARELY = "rarely"


class DayOfWeek(str, enum.Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class Terrain(str, enum.Enum):
    ROAD = "Road"
    TRAIL = "Trail"
    MIXED = "Mixed"
