"""Host UI glue for condition converters."""

from .property_binding import ConditionBinding, apply_condition

__all__ = ["ConditionBinding", "apply_condition"]
