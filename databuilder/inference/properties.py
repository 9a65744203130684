"""Builds Property records from authored sample fields."""
from decimal import Decimal
from typing import Any, Optional

from databuilder.inference.type_mapper import infer_type
from databuilder.inference.types import Property


def render_sample_value(value: Any) -> Optional[str]:
    """Literal text of a scalar sample; None for null, arrays and objects."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, Decimal)):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    return None


def build_property(name: str, value: Any) -> Property:
    return Property(
        name=name,
        type=infer_type(value),
        is_nullable=value is None,
        sample_value=render_sample_value(value),
    )
