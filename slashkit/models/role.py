from __future__ import annotations
from slashkit.http import Route, request
from slashkit.types import Snowflake
from .base import RawBaseModel


__all__ = ('Role',)


class Role(RawBaseModel):
    id: Snowflake
    name: str
    color: int = 0
    hoist: bool = False
    position: int = 0
    managed: bool = False
    mentionable: bool = False

    @classmethod
    async def fetch_all(cls, guild_id: Snowflake | int) -> list[Role]:
        return [
            cls(**role)
            for role in await request(Route(
                'GET',
                '/guilds/{guild_id}/roles',
                guild_id=guild_id
            ))
        ]
