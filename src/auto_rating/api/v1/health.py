"""Health check endpoint."""

from datetime import datetime, timezone
from typing import Annotated

from beartype import beartype
from fastapi import APIRouter, Depends

from ... import __version__
from ...core.config import Settings, get_settings
from ...core.logging_utils import get_logger
from ...schemas.premium import HealthResponse
from ...services.rating.rating_engine import RatingEngine
from ..dependencies import get_rating_engine

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
@beartype
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
    engine: Annotated[RatingEngine, Depends(get_rating_engine)],
) -> HealthResponse:
    """Report service status and how many rules are loaded."""
    rule_count = len(engine.rules)
    status = "healthy" if rule_count else "degraded"
    if status != "healthy":
        logger.warning("Rating engine has no rules loaded")

    return HealthResponse(
        status=status,
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        environment=settings.api_env,
        rule_count=rule_count,
    )
