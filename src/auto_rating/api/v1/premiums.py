"""Premium API endpoints."""

from typing import Annotated

from beartype import beartype
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from ...core.config import Settings, get_settings
from ...schemas.premium import PremiumRequest, PremiumResponse
from ...services.premium_service import PremiumService
from ..dependencies import get_premium_service

router = APIRouter(prefix="/premiums", tags=["premiums"])


@router.post("", response_model=PremiumResponse)
@beartype
async def calculate_premium(
    request: PremiumRequest,
    premium_service: Annotated[PremiumService, Depends(get_premium_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> PremiumResponse:
    """Rate a driver profile and return the premium breakdown."""
    result = premium_service.quote(request.to_profile())

    if result.is_err():
        raise HTTPException(status_code=500, detail=result.err_value)

    return PremiumResponse.from_quote(result.ok_value, settings.currency)


@router.post("/report", response_class=PlainTextResponse)
@beartype
async def premium_report(
    request: PremiumRequest,
    premium_service: Annotated[PremiumService, Depends(get_premium_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    """Rate a driver profile and return a plain-text breakdown."""
    result = premium_service.report(request.to_profile(), settings.currency)

    if result.is_err():
        raise HTTPException(status_code=500, detail=result.err_value)

    return result.ok_value
