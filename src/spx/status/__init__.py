"""Work item status resolution."""

from .probe import StatusProbe
from .state import StatusFlags, determine_status

__all__ = ["StatusFlags", "StatusProbe", "determine_status"]
