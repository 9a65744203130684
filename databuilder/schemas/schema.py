from pydantic import BaseModel, Field
from typing import Any, List, Optional
from databuilder.inference.types import Entity

class SchemaParseRequest(BaseModel):
    json_text: str = Field(..., examples=['{"product": {"name": "Sample", "price": 99.99}}'])
    use_type_discriminator: bool = False
    bucket: Optional[str] = None
    scope: Optional[str] = None
    collection: Optional[str] = None

class SchemaParseResponse(BaseModel):
    entities: List[Entity]
    count: int

class TypeInferRequest(BaseModel):
    value: Any = Field(None, examples=["2024-01-15T10:30:00Z"])
