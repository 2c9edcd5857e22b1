class InvalidLevelPlan(ValueError):
    """Raised when a level plan cannot be turned into a level."""


class OutOfBoundsQuery(IndexError):
    """Raised when a grid cell outside the level is read directly."""
