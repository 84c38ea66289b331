from slashkit.types import Snowflake
from datetime import datetime
from .base import RawBaseModel
from .user import User


__all__ = ('Member',)


class Member(RawBaseModel):
    user: User | None = None
    nick: str | None = None
    roles: list[Snowflake] = []
    joined_at: datetime | None = None
    pending: bool | None = None
