"""Input validation and output planning."""

from webimg.planner.resolver import resolve_plan
from webimg.planner.validator import validate_source

__all__ = ["resolve_plan", "validate_source"]
