from __future__ import annotations
from .enums import InteractionType, InteractionCallbackType, MessageFlag
from slashkit.http import Route, request
from slashkit.types import Snowflake
from typing import Any, Protocol
from pydantic import PrivateAttr
from .base import RawBaseModel
from .member import Member
from .user import User


__all__ = (
    'ButtonsCallback',
    'Interaction',
    'InteractionCallback',
)


class InteractionCallback(Protocol):
    async def __call__(self, interaction: Interaction) -> None:
        ...


class ButtonsCallback(Protocol):
    async def __call__(self, interaction: Interaction) -> int:
        ...


class Interaction(RawBaseModel):
    id: Snowflake
    application_id: Snowflake
    type: InteractionType
    token: str
    version: int = 1
    data: dict[str, Any] | None = None
    guild_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    member: Member | None = None
    user: User | None = None
    locale: str | None = None
    _responded: bool = PrivateAttr(False)

    @property
    def responded(self) -> bool:
        return self._responded

    @property
    def author(self) -> User | None:
        if self.member is not None and self.member.user is not None:
            return self.member.user

        return self.user

    @property
    def command_name(self) -> str | None:
        if self.type not in {
            InteractionType.APPLICATION_COMMAND,
            InteractionType.APPLICATION_COMMAND_AUTOCOMPLETE
        }:
            return None

        return (self.data or {}).get('name')

    @property
    def custom_id(self) -> str | None:
        if self.type not in {
            InteractionType.MESSAGE_COMPONENT,
            InteractionType.MODAL_SUBMIT
        }:
            return None

        return (self.data or {}).get('custom_id')

    @property
    def options(self) -> dict[str, Any]:
        return {
            option['name']: option.get('value')
            for option in (self.data or {}).get('options', [])
        }

    async def reply(
        self,
        content: str | None = None,
        *,
        ephemeral: bool = False,
        embeds: list[dict] | None = None
    ) -> None:
        json: dict[str, Any] = {}

        if content is not None:
            json['content'] = content

        if embeds:
            json['embeds'] = embeds

        if ephemeral:
            json['flags'] = MessageFlag.EPHEMERAL.value

        if self._responded:
            # ? only one callback per interaction, everything after is a followup
            await request(
                Route(
                    'POST',
                    '/webhooks/{application_id}/{interaction_token}',
                    application_id=self.application_id,
                    interaction_token=self.token
                ),
                json=json,
                token=None
            )
            return

        await request(
            Route(
                'POST',
                '/interactions/{interaction_id}/{interaction_token}/callback',
                interaction_id=self.id,
                interaction_token=self.token
            ),
            json={
                'type': InteractionCallbackType.CHANNEL_MESSAGE_WITH_SOURCE.value,
                'data': json
            },
            token=None
        )
        self._responded = True
