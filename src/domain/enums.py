"""Domain enumerations: the outcome tags reported to clients."""

import enum


class UpdateStatus(str, enum.Enum):
    INITIAL = "Initial"
    DIST_TRAVELED = "DistTraveled"


class QueryStatus(str, enum.Enum):
    MISSING = "Missing"
    LOCATION = "Location"
