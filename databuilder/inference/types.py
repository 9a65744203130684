"""Models produced by schema inference and consumed by the code templates."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, computed_field

from databuilder.inference.naming import (
    pluralize,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_title_case,
)

DEFAULT_BUCKET = "general"
DEFAULT_SCOPE = "general"
DISCRIMINATOR_COLLECTION = "general"

DISPLAY_PROPERTY_NAMES = {"id", "version", "versionnumber", "name", "description"}
MAX_DISPLAY_PROPERTIES = 5

# Material icon per entity name, singular and plural
ENTITY_ICONS = {
    "user": "person", "users": "person",
    "account": "account_circle", "accounts": "account_circle",
    "category": "category", "categories": "category",
    "product": "inventory_2", "products": "inventory_2",
    "order": "shopping_cart", "orders": "shopping_cart",
    "idea": "lightbulb", "ideas": "lightbulb",
    "task": "task_alt", "tasks": "task_alt",
    "project": "folder", "projects": "folder",
    "document": "description", "documents": "description",
    "setting": "settings", "settings": "settings",
    "role": "admin_panel_settings", "roles": "admin_panel_settings",
    "permission": "security", "permissions": "security",
    "notification": "notifications", "notifications": "notifications",
    "message": "message", "messages": "message",
    "comment": "comment", "comments": "comment",
    "report": "assessment", "reports": "assessment",
    "dashboard": "dashboard",
    "log": "history", "logs": "history",
    "file": "attach_file", "files": "attach_file",
    "image": "image", "images": "image",
    "video": "videocam", "videos": "videocam",
    "event": "event", "events": "event",
    "calendar": "calendar_today",
    "contact": "contacts", "contacts": "contacts",
    "customer": "people", "customers": "people",
    "employee": "badge", "employees": "badge",
    "team": "groups", "teams": "groups",
}
DEFAULT_ICON = "list"


class TypeKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    WIDE_INTEGER = "wide_integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE_TIME = "date_time"
    UNIQUE_IDENTIFIER = "unique_identifier"
    OBJECT_MAP = "object_map"
    LIST = "list"
    ANY = "any"


BACKEND_NAMES = {
    TypeKind.STRING: "string",
    TypeKind.INTEGER: "int",
    TypeKind.WIDE_INTEGER: "long",
    TypeKind.DECIMAL: "decimal",
    TypeKind.BOOLEAN: "bool",
    TypeKind.DATE_TIME: "DateTime",
    TypeKind.UNIQUE_IDENTIFIER: "Guid",
    TypeKind.OBJECT_MAP: "Dictionary<string, object>",
    TypeKind.ANY: "object",
}

FRONTEND_NAMES = {
    TypeKind.STRING: "string",
    TypeKind.INTEGER: "number",
    TypeKind.WIDE_INTEGER: "number",
    TypeKind.DECIMAL: "number",
    TypeKind.BOOLEAN: "boolean",
    TypeKind.DATE_TIME: "Date",
    TypeKind.UNIQUE_IDENTIFIER: "string",
    TypeKind.OBJECT_MAP: "Record<string, any>",
    TypeKind.ANY: "any",
}


class TypeDescriptor(BaseModel):
    """One inferred type, rendered into both the backend and frontend vocabularies."""
    model_config = ConfigDict(frozen=True)

    kind: TypeKind
    element: Optional[TypeDescriptor] = None
    nullable: bool = False

    @classmethod
    def of(cls, kind: TypeKind, nullable: bool = False) -> "TypeDescriptor":
        return cls(kind=kind, nullable=nullable)

    @classmethod
    def list_of(cls, element: "TypeDescriptor") -> "TypeDescriptor":
        return cls(kind=TypeKind.LIST, element=element)

    @computed_field  # type: ignore[misc]
    @property
    def backend(self) -> str:
        if self.kind == TypeKind.LIST:
            name = f"List<{self.element.backend if self.element else 'object'}>"
        else:
            name = BACKEND_NAMES[self.kind]
        return f"{name}?" if self.nullable else name

    @computed_field  # type: ignore[misc]
    @property
    def frontend(self) -> str:
        if self.kind == TypeKind.LIST:
            inner = self.element.frontend if self.element else "any"
            if self.element is not None and self.element.nullable:
                inner = f"({inner})"
            name = f"{inner}[]"
        else:
            name = FRONTEND_NAMES[self.kind]
        return f"{name} | null" if self.nullable else name


STRING_TYPE = TypeDescriptor.of(TypeKind.STRING)


class Property(BaseModel):
    """A single field of an entity, inferred from one sample value."""
    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeDescriptor
    is_nullable: bool = False
    is_identity: bool = False
    sample_value: Optional[str] = None

    @computed_field  # type: ignore[misc]
    @property
    def pascal_name(self) -> str:
        return to_pascal_case(self.name)

    @computed_field  # type: ignore[misc]
    @property
    def camel_name(self) -> str:
        return to_camel_case(self.name)

    @computed_field  # type: ignore[misc]
    @property
    def backend_type(self) -> str:
        return self.type.backend

    @computed_field  # type: ignore[misc]
    @property
    def frontend_type(self) -> str:
        return self.type.frontend

    @computed_field  # type: ignore[misc]
    @property
    def is_collection(self) -> bool:
        return self.type.kind == TypeKind.LIST

    @computed_field  # type: ignore[misc]
    @property
    def is_object(self) -> bool:
        return self.type.kind == TypeKind.OBJECT_MAP

    @computed_field  # type: ignore[misc]
    @property
    def is_required(self) -> bool:
        return not self.is_nullable

    def as_identity(self) -> "Property":
        """Copy of this property marked as the identity, typed as a plain string."""
        return self.model_copy(update={"is_identity": True, "type": STRING_TYPE})


class Entity(BaseModel):
    """A modeled entity: one top-level key of the schema document."""
    model_config = ConfigDict(frozen=True)

    name: str
    properties: List[Property] = []
    use_type_discriminator: bool = False
    bucket: str = DEFAULT_BUCKET
    scope: str = DEFAULT_SCOPE
    collection_override: Optional[str] = None

    @computed_field  # type: ignore[misc]
    @property
    def name_camel_case(self) -> str:
        return to_camel_case(self.name)

    @computed_field  # type: ignore[misc]
    @property
    def name_kebab_case(self) -> str:
        return to_kebab_case(self.name)

    @computed_field  # type: ignore[misc]
    @property
    def name_plural(self) -> str:
        return pluralize(self.name)

    @computed_field  # type: ignore[misc]
    @property
    def name_plural_camel_case(self) -> str:
        return to_camel_case(self.name_plural)

    @computed_field  # type: ignore[misc]
    @property
    def name_plural_kebab_case(self) -> str:
        return to_kebab_case(self.name_plural)

    @computed_field  # type: ignore[misc]
    @property
    def display_name(self) -> str:
        return to_title_case(self.name)

    @computed_field  # type: ignore[misc]
    @property
    def display_name_plural(self) -> str:
        return to_title_case(self.name_plural)

    @computed_field  # type: ignore[misc]
    @property
    def identity_property(self) -> Optional[Property]:
        return next((p for p in self.properties if p.is_identity), None)

    @computed_field  # type: ignore[misc]
    @property
    def identity_property_name(self) -> str:
        prop = self.identity_property
        return prop.pascal_name if prop else "Id"

    @computed_field  # type: ignore[misc]
    @property
    def identity_property_camel_name(self) -> str:
        prop = self.identity_property
        return prop.camel_name if prop else "id"

    @computed_field  # type: ignore[misc]
    @property
    def non_identity_properties(self) -> List[Property]:
        return [p for p in self.properties if not p.is_identity]

    @computed_field  # type: ignore[misc]
    @property
    def display_properties(self) -> List[Property]:
        """Columns shown in a generated list view."""
        matches = [p for p in self.properties if p.pascal_name.lower() in DISPLAY_PROPERTY_NAMES]
        return matches[:MAX_DISPLAY_PROPERTIES]

    @computed_field  # type: ignore[misc]
    @property
    def has_name_property(self) -> bool:
        return any(p.pascal_name.lower() == "name" for p in self.properties)

    @computed_field  # type: ignore[misc]
    @property
    def has_description_property(self) -> bool:
        return any(p.pascal_name.lower() == "description" for p in self.properties)

    @computed_field  # type: ignore[misc]
    @property
    def icon(self) -> str:
        return ENTITY_ICONS.get(self.name.lower(), DEFAULT_ICON)

    @computed_field  # type: ignore[misc]
    @property
    def collection(self) -> str:
        if self.collection_override:
            return self.collection_override
        return DISCRIMINATOR_COLLECTION if self.use_type_discriminator else self.name_camel_case

    def with_storage(
        self,
        bucket: Optional[str] = None,
        scope: Optional[str] = None,
        collection: Optional[str] = None,
        use_type_discriminator: bool = False,
    ) -> "Entity":
        """Copy with storage placement overrides.

        A discriminator detected from the schema is never switched off here.
        """
        update = {}
        if bucket:
            update["bucket"] = bucket
        if scope:
            update["scope"] = scope
        if collection:
            update["collection_override"] = collection
        if use_type_discriminator:
            update["use_type_discriminator"] = True
        return self.model_copy(update=update)
