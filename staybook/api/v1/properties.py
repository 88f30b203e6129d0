from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from staybook.api.v1.schemas import PropertySchema, ReviewsPanelSchema
from staybook.application.use_cases.load_property import LoadPropertyUseCase
from staybook.application.use_cases.load_reviews import LoadReviewsUseCase
from staybook.wiring.dependencies import get_load_property_use_case, get_load_reviews_use_case

router = APIRouter()


@router.get("/properties/{property_id}", response_model=PropertySchema)
async def get_property(
    property_id: str,
    uc: LoadPropertyUseCase = Depends(get_load_property_use_case),
):
    page = await uc.execute(property_id)
    if page.status == "not_found":
        raise HTTPException(status_code=404, detail=page.message)
    if page.status == "error":
        raise HTTPException(status_code=502, detail=page.message)
    return PropertySchema(**asdict(page.details))


@router.get("/properties/{property_id}/reviews", response_model=ReviewsPanelSchema)
async def get_reviews(
    property_id: str,
    show_all: bool = False,
    uc: LoadReviewsUseCase = Depends(get_load_reviews_use_case),
):
    panel = await uc.execute(property_id, show_all=show_all)
    if panel.status == "error":
        raise HTTPException(status_code=502, detail=panel.message)
    return ReviewsPanelSchema(**asdict(panel))
