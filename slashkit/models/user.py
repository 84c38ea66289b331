from slashkit.types import Snowflake
from .base import RawBaseModel


__all__ = ('User',)


class User(RawBaseModel):
    id: Snowflake
    username: str
    discriminator: str = '0'
    global_name: str | None = None
    avatar: str | None = None
    bot: bool | None = None
