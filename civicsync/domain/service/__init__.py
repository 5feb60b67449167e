"""Domain services."""

from .analytics_service import AnalyticsService, AnalyticsSnapshot, DailyCount
from .base import Service
from .image_service import ImageService, ImageStorage
from .issue_service import IssueService
from .jwt_service import JWTService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AnalyticsService",
    "AnalyticsSnapshot",
    "DailyCount",
    "ImageService",
    "ImageStorage",
    "IssueService",
    "JWTService",
    "Service",
    "UserService",
    "VoteService",
]
