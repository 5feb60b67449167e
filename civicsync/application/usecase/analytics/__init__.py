"""Analytics use cases."""

from .get_analytics import (
    GetAnalyticsRequest,
    GetAnalyticsResponse,
    GetAnalyticsUseCase,
)

__all__ = ["GetAnalyticsRequest", "GetAnalyticsResponse", "GetAnalyticsUseCase"]
