# rabat_landmarks/routers/landmarks.py
import logging

from fastapi import APIRouter, Depends, HTTPException

from rabat_landmarks.exceptions import LandmarkNotFoundError, StoreError
from rabat_landmarks.schemas import error as schemas_error
from rabat_landmarks.schemas import landmark as schemas_landmark
from rabat_landmarks.storage import LandmarkStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()
@router.get(
    "/api/landmarks",
    response_model=list[schemas_landmark.Landmark],
    response_model_exclude_none=True, # vrModelUrlなど，無い項目はキーごと省略する．
    responses={500: {"model": schemas_error.ErrorMessage}},
)
def read_landmarks(store: LandmarkStore = Depends(get_store)):
    """
    全てのランドマークを作成順で返す（0件の場合は空のリスト）．
    """
    try:
        return store.get_landmarks()
    except StoreError:
        logger.exception("Error fetching landmarks")
        raise HTTPException(status_code=500, detail="Failed to fetch landmarks")

@router.get(
    "/api/landmarks/{slug}",
    response_model=schemas_landmark.Landmark,
    response_model_exclude_none=True,
    responses={404: {"model": schemas_error.ErrorMessage}, 500: {"model": schemas_error.ErrorMessage}},
)
def read_landmark(slug: str, store: LandmarkStore = Depends(get_store)):
    try:
        return store.require_landmark(slug)
    except LandmarkNotFoundError:
        raise HTTPException(status_code=404, detail="Landmark not found")
    except StoreError:
        logger.exception("Error fetching landmark: slug=%s", slug)
        raise HTTPException(status_code=500, detail="Failed to fetch landmark")
