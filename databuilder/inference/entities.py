"""Assembles Entity models: discriminator extraction and identity detection."""
import logging
from typing import Any, List, Mapping

from databuilder.inference.naming import to_pascal_case
from databuilder.inference.properties import build_property
from databuilder.inference.types import STRING_TYPE, Entity, Property

log = logging.getLogger(__name__)

DISCRIMINATOR_FIELD = "type"


def extract_discriminator(properties: List[Property]):
    """Split out authored ``type`` fields.

    Returns the remaining properties and whether a discriminator was found.
    """
    remaining = [p for p in properties if p.name.lower() != DISCRIMINATOR_FIELD]
    return remaining, len(remaining) != len(properties)


def ensure_identity(entity_name: str, properties: List[Property]) -> List[Property]:
    """Mark the identity property, synthesizing ``Id`` when none is authored.

    ``{entity}Id`` wins over ``id``; matching is case-insensitive on the
    authored field name. Identity values are always strings.
    """
    for candidate in (f"{entity_name}Id", "id"):
        for index, prop in enumerate(properties):
            if prop.name.lower() == candidate.lower():
                log.debug("Using %s as identity property", prop.name, extra={"entity": entity_name})
                return properties[:index] + [prop.as_identity()] + properties[index + 1:]

    log.info("No identity field found, adding Id", extra={"entity": entity_name})
    synthesized = Property(name="Id", type=STRING_TYPE, is_identity=True)
    return [synthesized] + properties


def build_entity(key: str, members: Mapping[str, Any]) -> Entity:
    """Build an Entity from one top-level schema key and its sample object."""
    name = to_pascal_case(key)
    properties = [build_property(field, value) for field, value in members.items()]

    properties, use_type_discriminator = extract_discriminator(properties)
    if use_type_discriminator:
        log.debug("Detected type discriminator", extra={"entity": name})

    return Entity(
        name=name,
        properties=ensure_identity(name, properties),
        use_type_discriminator=use_type_discriminator,
    )
