# survey_backend/routers/responses.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from survey_backend.models.response_models import ErrorBody, SaveResult
from survey_backend.routers.dependencies import get_store
from survey_backend.services.errors import ApiError, InternalFailure, MissingParameter
from survey_backend.services.response_store import ResponseStore

router = APIRouter(prefix="/api/responses", tags=["Responses"])
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {400: {"model": ErrorBody}, 500: {"model": ErrorBody}}


def require_type(response_type: Optional[str], method: str) -> str:
    if not response_type:
        logger.error("%s request missing type parameter", method)
        raise MissingParameter("Type parameter is required")
    return response_type


@router.get("", responses=ERROR_RESPONSES)
def get_responses(
    response_type: Optional[str] = Query(None, alias="type"),
    store: ResponseStore = Depends(get_store),
):
    """
    Returns the whole stored document for a category.
    Categories that were never saved come back as [].
    """
    response_type = require_type(response_type, "GET")
    try:
        return store.load(response_type)
    except ApiError:
        raise
    except Exception as e:
        logger.exception("Error in GET /api/responses")
        raise InternalFailure(str(e)) from e


@router.post("", response_model=SaveResult, responses=ERROR_RESPONSES)
async def save_responses(
    request: Request,
    response_type: Optional[str] = Query(None, alias="type"),
    store: ResponseStore = Depends(get_store),
):
    """
    Overwrites the category's document with the request body, verbatim.
    The body can be any JSON value.
    """
    response_type = require_type(response_type, "POST")
    try:
        document = await request.json()
        logger.debug("Received data for type %s: %r", response_type, document)
        store.save(response_type, document)
    except ApiError:
        raise
    except Exception as e:
        logger.exception("Error in POST /api/responses")
        raise InternalFailure(str(e)) from e

    return SaveResult(success=True)
