"""Entry point: parse a JSON schema document into entities."""
import json
import logging
from decimal import Decimal
from typing import List

from databuilder.core.errors import SchemaShapeError, SchemaSyntaxError
from databuilder.inference.entities import build_entity
from databuilder.inference.types import Entity

log = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise SchemaSyntaxError(f"Non-standard JSON constant '{name}' is not allowed")


def load_json(json_text: str):
    """Decode JSON text, keeping fractional numbers exact."""
    try:
        return json.loads(json_text, parse_float=Decimal, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        log.error("Failed to parse JSON schema: %s", e)
        raise SchemaSyntaxError(e.msg, lineno=e.lineno, colno=e.colno, pos=e.pos) from e
    except RecursionError as e:
        log.error("Failed to parse JSON schema: nesting too deep")
        raise SchemaSyntaxError("nesting too deep") from e


def parse_schema(json_text: str) -> List[Entity]:
    """
    Parse a schema document into entities, one per top-level key.

    Args:
        json_text: JSON text whose root is an object of sample objects,
            e.g. ``{"product": {"name": "Sample", "price": 9.99}}``

    Returns:
        Entities in document order; an empty root object yields an empty list

    Raises:
        SchemaSyntaxError: the text is not valid JSON
        SchemaShapeError: the root, or one of its members, is not an object
    """
    log.debug("Parsing JSON schema")
    root = load_json(json_text)

    if not isinstance(root, dict):
        raise SchemaShapeError("JSON root must be an object where each property represents an entity.")

    entities = []
    for key, members in root.items():
        if not isinstance(members, dict):
            raise SchemaShapeError(f"Entity '{key}' must be defined as a JSON object.", key=key)
        entity = build_entity(key, members)
        entities.append(entity)
        log.info(
            "Parsed entity %s with %d properties", entity.name, len(entity.properties),
            extra={"entity": entity.name},
        )

    return entities
