"""Maps sample JSON values to backend/frontend type descriptors."""
import re
import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from databuilder.inference.types import TypeDescriptor, TypeKind

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1

# ISO-8601 calendar date, optionally followed by a time and UTC offset
ISO_DATE_TIME = re.compile(
    r"^(\d{4}-\d{2}-\d{2})"
    r"(?:[T ](\d{2}:\d{2}(?::\d{2}(?:\.\d{1,9})?)?)(Z|[+-]\d{2}(?::?\d{2})?)?)?$",
    re.IGNORECASE,
)
CANONICAL_UUID = re.compile(
    r"^\{?[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\}?$",
    re.IGNORECASE,
)


def is_date_time(value: str) -> bool:
    """Check a string against the accepted ISO-8601 date/date-time grammar."""
    m = ISO_DATE_TIME.fullmatch(value)
    if not m:
        return False
    day, clock, offset = m.groups()
    try:
        date.fromisoformat(day)
        if clock:
            # fromisoformat accepts at most microseconds
            hms, _, fraction = clock.partition(".")
            stamp = f"{day}T{hms}" + (f".{fraction[:6].ljust(6, '0')}" if fraction else "")
            if offset:
                stamp += "+00:00" if offset.upper() == "Z" else _normalize_offset(offset)
            datetime.fromisoformat(stamp)
    except ValueError:
        return False
    return True


def _normalize_offset(offset: str) -> str:
    digits = offset[1:].replace(":", "")
    return f"{offset[0]}{digits[:2]}:{digits[2:] or '00'}"


def is_uuid(value: str) -> bool:
    if (value.startswith("{") != value.endswith("}")) or not CANONICAL_UUID.fullmatch(value):
        return False
    try:
        uuid.UUID(value.strip("{}"))
    except ValueError:
        return False
    return True


def infer_string_type(value: str) -> TypeDescriptor:
    if not value:
        return TypeDescriptor.of(TypeKind.STRING)
    if is_date_time(value):
        return TypeDescriptor.of(TypeKind.DATE_TIME)
    if is_uuid(value):
        return TypeDescriptor.of(TypeKind.UNIQUE_IDENTIFIER)
    return TypeDescriptor.of(TypeKind.STRING)


def infer_number_type(value) -> TypeDescriptor:
    """Pick the narrowest numeric type that holds the sample."""
    if isinstance(value, int):
        integral = value
    elif isinstance(value, float) and not value.is_integer():
        return TypeDescriptor.of(TypeKind.DECIMAL)
    elif isinstance(value, Decimal) and value != value.to_integral_value():
        return TypeDescriptor.of(TypeKind.DECIMAL)
    else:
        try:
            integral = int(value)
        except (OverflowError, ValueError):
            return TypeDescriptor.of(TypeKind.INTEGER)

    if INT32_MIN <= integral <= INT32_MAX:
        return TypeDescriptor.of(TypeKind.INTEGER)
    if INT64_MIN <= integral <= INT64_MAX:
        return TypeDescriptor.of(TypeKind.WIDE_INTEGER)
    return TypeDescriptor.of(TypeKind.INTEGER)


def infer_type(value: Any) -> TypeDescriptor:
    """Map one parsed JSON value to its type descriptor.

    Arrays are typed from their first element only; objects are always an
    untyped string-keyed map and their members are not inspected.
    """
    if value is None:
        return TypeDescriptor.of(TypeKind.STRING, nullable=True)
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return TypeDescriptor.of(TypeKind.BOOLEAN)
    if isinstance(value, str):
        return infer_string_type(value)
    if isinstance(value, (int, float, Decimal)):
        return infer_number_type(value)
    if isinstance(value, (list, tuple)):
        if not value:
            return TypeDescriptor.list_of(TypeDescriptor.of(TypeKind.ANY))
        return TypeDescriptor.list_of(infer_type(value[0]))
    if isinstance(value, dict):
        return TypeDescriptor.of(TypeKind.OBJECT_MAP)
    return TypeDescriptor.of(TypeKind.ANY)


def backend_to_frontend(type_name: str) -> str:
    """Translate a backend type name into the frontend vocabulary."""
    nullable = type_name.endswith("?")
    base = type_name.rstrip("?")

    simple = {
        "string": "string",
        "int": "number",
        "long": "number",
        "double": "number",
        "decimal": "number",
        "float": "number",
        "bool": "boolean",
        "DateTime": "Date",
        "DateOnly": "Date",
        "TimeOnly": "string",
        "Guid": "string",
        "object": "any",
        "Dictionary<string, object>": "Record<string, any>",
    }
    if base in simple:
        ts_type = simple[base]
    elif base.startswith("List<") and base.endswith(">"):
        ts_type = _array_of(backend_to_frontend(base[5:-1]))
    elif base.endswith("[]"):
        ts_type = _array_of(backend_to_frontend(base[:-2]))
    else:
        ts_type = "any"

    return f"{ts_type} | null" if nullable else ts_type


def _array_of(element: str) -> str:
    if " | " in element:
        return f"({element})[]"
    return f"{element}[]"
