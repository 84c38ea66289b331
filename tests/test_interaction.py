"""Tests for interaction models and replies."""

from unittest.mock import AsyncMock, patch

import pytest

from slashkit.env import env
from slashkit.models import Interaction, InteractionType, MessageFlag

PAYLOAD = {
    "id": "1100000000000000001",
    "application_id": "1200000000000000002",
    "type": 2,
    "token": "tok",
    "guild_id": "1300000000000000003",
    "data": {
        "id": "1500000000000000005",
        "name": "echo",
        "type": 1,
        "options": [{"name": "text", "type": 3, "value": "hi"}],
    },
    "member": {
        "user": {"id": "1600000000000000006", "username": "tester"},
        "roles": ["2000000000000000001"],
    },
}


class TestInteractionModel:
    """Test suite for parsing interaction payloads."""

    def test_parse(self) -> None:
        """Test snowflakes and nested models."""
        interaction = Interaction(**PAYLOAD)

        assert interaction.type is InteractionType.APPLICATION_COMMAND
        assert interaction.id == 1100000000000000001
        assert interaction.member is not None
        assert interaction.member.roles == [2000000000000000001]
        assert interaction.author is not None
        assert interaction.author.username == "tester"
        assert interaction._raw["token"] == "tok"

    def test_command_fields(self) -> None:
        """Test command name and option values."""
        interaction = Interaction(**PAYLOAD)

        assert interaction.command_name == "echo"
        assert interaction.custom_id is None
        assert interaction.options == {"text": "hi"}

    def test_component_fields(self) -> None:
        """Test custom ids on component interactions."""
        interaction = Interaction(
            **{**PAYLOAD, "type": 3, "data": {"custom_id": "vote", "component_type": 2}}
        )

        assert interaction.command_name is None
        assert interaction.custom_id == "vote"


class TestReply:
    """Test suite for interaction replies."""

    @pytest.mark.asyncio
    async def test_first_reply_is_callback(self) -> None:
        """Test that the first reply answers the interaction callback."""
        interaction = Interaction(**PAYLOAD)

        with patch("slashkit.models.interaction.request", AsyncMock()) as request:
            await interaction.reply("hello", ephemeral=True)

        route = request.await_args.args[0]
        assert route.method == "POST"
        assert route.url == (
            f"{env.discord_url}/interactions/1100000000000000001/tok/callback"
        )
        assert request.await_args.kwargs["json"] == {
            "type": 4,
            "data": {"content": "hello", "flags": MessageFlag.EPHEMERAL.value},
        }
        assert interaction.responded

    @pytest.mark.asyncio
    async def test_second_reply_is_followup(self) -> None:
        """Test that later replies go through the followup webhook."""
        interaction = Interaction(**PAYLOAD)

        with patch("slashkit.models.interaction.request", AsyncMock()) as request:
            await interaction.reply("first")
            await interaction.reply("second")

        route = request.await_args_list[1].args[0]
        assert route.url == f"{env.discord_url}/webhooks/1200000000000000002/tok"
        assert request.await_args_list[1].kwargs["json"] == {"content": "second"}
