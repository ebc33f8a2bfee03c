"""
Villains API endpoints.

Maps HTTP requests on ``/api/villains`` to `VillainService` calls and the
results to status codes: empty lookups answer 204, missing mutation targets
404, invalid payloads 422 (pydantic).
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status
from fastapi.responses import PlainTextResponse

from rest_villains.db import schemas
from rest_villains.services.villain_service import (
    VillainNotFoundError,
    VillainService,
    get_villain_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/villains", tags=["villains"])


@router.get("/hello", response_class=PlainTextResponse, tags=["hello"])
def hello():
    return "Hello Villain Resource!"


@router.get(
    "/random",
    response_model=schemas.Villain,
    summary="Returns a random villain",
    responses={404: {"description": "No villains stored"}},
)
def get_random_villain(service: VillainService = Depends(get_villain_service)):
    villain = service.find_random_villain()
    if villain is None:
        logger.debug("No villain available for random selection")
        raise HTTPException(status_code=404, detail="No villain found")
    logger.debug("Found random villain %s", villain)
    return villain


@router.get(
    "",
    response_model=List[schemas.Villain],
    summary="Returns all the villains from the database",
    responses={204: {"description": "No Villains"}},
)
def get_all_villains(service: VillainService = Depends(get_villain_service)):
    villains = service.find_all_villains()
    logger.debug("Total number of villains %d", len(villains))
    if not villains:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return villains


@router.get(
    "/{villain_id}",
    response_model=schemas.Villain,
    summary="Returns a villain for a given identifier",
    responses={204: {"description": "No Villain found for the given identifier"}},
)
def get_villain(
    villain_id: int = Path(ge=1, le=schemas.MAX_IDENTIFIER),
    service: VillainService = Depends(get_villain_service),
):
    villain = service.find_villain_by_id(villain_id)
    if villain is None:
        logger.debug("No villain found with id %s", villain_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    logger.debug("Found villain %s", villain)
    return villain


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Creates a valid villain",
    responses={201: {"description": "The URI of the created villain"}},
)
def create_villain(
    villain: schemas.VillainCreate,
    request: Request,
    service: VillainService = Depends(get_villain_service),
):
    created = service.persist_villain(villain)
    location = str(request.url_for("get_villain", villain_id=created.id))
    logger.debug("New villain created with URI %s", location)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})


@router.put(
    "",
    response_model=schemas.Villain,
    summary="Updates an existing villain",
    responses={404: {"description": "No Villain found for the given identifier"}},
)
def update_villain(
    villain: schemas.VillainUpdate,
    service: VillainService = Depends(get_villain_service),
):
    try:
        updated = service.update_villain(villain)
    except VillainNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    logger.debug("Villain updated with new value %s", updated)
    return updated


@router.delete(
    "/{villain_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Deletes an existing villain",
    responses={404: {"description": "No Villain found for the given identifier"}},
)
def delete_villain(
    villain_id: int = Path(ge=1, le=schemas.MAX_IDENTIFIER),
    service: VillainService = Depends(get_villain_service),
):
    try:
        service.delete_villain(villain_id)
    except VillainNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    logger.debug("Villain deleted with id %s", villain_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
