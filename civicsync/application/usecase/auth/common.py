"""Shared auth response models."""

from civicsync.application.usecase.base import CamelModel
from civicsync.domain.model import User


class UserInfo(CamelModel):
    """Public view of a user."""

    id: str
    email: str
    name: str

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(id=str(user.id), email=user.email, name=user.name)
