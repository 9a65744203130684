import logging
from fastapi import APIRouter, HTTPException
from databuilder.core.config import settings
from databuilder.core.errors import SchemaShapeError, SchemaSyntaxError
from databuilder.inference.parser import parse_schema
from databuilder.inference.type_mapper import infer_type
from databuilder.inference.types import TypeDescriptor
from databuilder.schemas.schema import SchemaParseRequest, SchemaParseResponse, TypeInferRequest

log = logging.getLogger(__name__)

router = APIRouter()

@router.post("/schema/parse", response_model=SchemaParseResponse)
def parse(req: SchemaParseRequest):
    try:
        entities = parse_schema(req.json_text)
    except SchemaSyntaxError as e:
        raise HTTPException(
            status_code=400,
            detail={"message": str(e), "line": e.lineno, "column": e.colno},
        )
    except SchemaShapeError as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "key": e.key})

    entities = [
        entity.with_storage(
            bucket=req.bucket or settings.couchbase_bucket,
            scope=req.scope or settings.couchbase_scope,
            collection=req.collection,
            use_type_discriminator=req.use_type_discriminator or settings.use_type_discriminator,
        )
        for entity in entities
    ]
    log.info("Parsed schema with %d entities", len(entities))
    return SchemaParseResponse(entities=entities, count=len(entities))

@router.post("/types/infer", response_model=TypeDescriptor)
def infer(req: TypeInferRequest):
    return infer_type(req.value)
