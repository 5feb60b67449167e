"""Analytics routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from civicsync.application.usecase.analytics import (
    GetAnalyticsRequest,
    GetAnalyticsResponse,
    GetAnalyticsUseCase,
)
from civicsync.domain.service import JWTService
from civicsync.interface.api.security import authenticate

router = APIRouter(prefix="/api", tags=["analytics"], route_class=DishkaRoute)


@router.get("/analytics", response_model=GetAnalyticsResponse)
async def get_analytics(
    get_analytics_use_case: FromDishka[GetAnalyticsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetAnalyticsResponse:
    """Aggregate statistics over all issues, votes and users."""
    authenticate(jwt_service, authorization)
    return await get_analytics_use_case.execute(GetAnalyticsRequest())
