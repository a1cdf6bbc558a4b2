from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.errors import INTERNAL_ERROR, INVALID_USER_ID, USER_NOT_FOUND
from app.core.object_id import is_valid_object_id, normalize_object_id
from app.crud.users import find_user_by_id_and_min_age
from app.db.session import get_db
from app.schemas.api_contract import ErrorResponse, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# Users at or below this age are reported exactly like missing users.
MIN_AGE = 21


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def get_user(user_id: str, db: Session = Depends(get_db)) -> UserResponse:
    logger.info("Fetching user with ID: %s", user_id)

    if not is_valid_object_id(user_id):
        raise HTTPException(status_code=400, detail=INVALID_USER_ID)
    user_id = normalize_object_id(user_id)

    try:
        user = find_user_by_id_and_min_age(db, user_id, min_age=MIN_AGE)
    except Exception:
        logger.exception("Error fetching user", extra={"user_id": user_id})
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

    if user is None:
        raise HTTPException(status_code=404, detail=USER_NOT_FOUND)
    return UserResponse.model_validate(user)
