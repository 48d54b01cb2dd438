from fastapi import APIRouter
from typing import List

from .. import schemas
from ..calculators.registry import describe_shapes

router = APIRouter(prefix="/shapes", tags=["shapes"])


@router.get("/", response_model=List[schemas.ShapeInfo])
def list_shapes():
    """Every frame shape selector with its accepted fields and collar range."""
    return describe_shapes()
