"""Shared pytest fixtures for the slashkit test suite."""

from collections.abc import Callable
from typing import Any

import logfire
import pytest
from pydantic import PrivateAttr

from slashkit.models import Interaction


class RecordingInteraction(Interaction):
    """Interaction that records replies instead of calling discord."""

    _replies: list[dict[str, Any]] = PrivateAttr(default_factory=list)

    @property
    def replies(self) -> list[dict[str, Any]]:
        return self._replies

    async def reply(
        self,
        content: str | None = None,
        *,
        ephemeral: bool = False,
        embeds: list[dict] | None = None
    ) -> None:
        self._replies.append({
            'content': content,
            'ephemeral': ephemeral,
            'embeds': embeds
        })
        self._responded = True


@pytest.fixture(scope="session", autouse=True)
def configure_logfire() -> None:
    """Keep logfire local for the whole session."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def make_interaction() -> Callable[..., RecordingInteraction]:
    """Build command interactions from a guild member.

    Returns:
        Factory taking the command name, member role ids and overrides.
    """

    def factory(
        name: str = "ping",
        roles: list[int] | None = None,
        **overrides: Any,
    ) -> RecordingInteraction:
        payload: dict[str, Any] = {
            "id": "1100000000000000001",
            "application_id": "1200000000000000002",
            "type": 2,
            "token": "interaction-token",
            "guild_id": "1300000000000000003",
            "channel_id": "1400000000000000004",
            "data": {"id": "1500000000000000005", "name": name, "type": 1},
            "member": {
                "user": {"id": "1600000000000000006", "username": "tester"},
                "roles": [str(role) for role in roles or []],
            },
        }
        payload.update(overrides)
        return RecordingInteraction(**payload)

    return factory
