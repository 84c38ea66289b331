"""Tests for the role membership check."""

from unittest.mock import AsyncMock, patch

import pytest

from slashkit.models import Role
from slashkit.roles import interaction_user_have_roles, split_role_identifiers

GUILD_ROLES = [
    Role(id="2000000000000000001", name="Admin"),
    Role(id="2000000000000000002", name="Moderator"),
]


class TestSplitRoleIdentifiers:
    """Test suite for separating role ids from role names."""

    def test_ids_and_names(self) -> None:
        """Test mixed identifiers."""
        ids, names = split_role_identifiers([1, "22", "Admin"])

        assert ids == {1, 22}
        assert names == {"admin"}


class TestInteractionUserHaveRoles:
    """Test suite for the default role oracle."""

    @pytest.mark.asyncio
    async def test_matching_id(self, make_interaction) -> None:
        """Test that holding one of the role ids is enough."""
        interaction = make_interaction(roles=[2000000000000000001])

        with patch.object(Role, "fetch_all", AsyncMock()) as fetch_all:
            assert await interaction_user_have_roles(
                interaction, {2000000000000000001, 2000000000000000009}
            )

        fetch_all.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_id(self, make_interaction) -> None:
        """Test that ids alone never trigger a guild lookup."""
        interaction = make_interaction(roles=[2000000000000000002])

        with patch.object(Role, "fetch_all", AsyncMock()) as fetch_all:
            assert not await interaction_user_have_roles(
                interaction, {"2000000000000000001"}
            )

        fetch_all.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_matching_name(self, make_interaction) -> None:
        """Test that role names are resolved through the guild."""
        interaction = make_interaction(roles=[2000000000000000002])

        with patch.object(
            Role, "fetch_all", AsyncMock(return_value=GUILD_ROLES)
        ) as fetch_all:
            assert await interaction_user_have_roles(interaction, {"moderator"})

        fetch_all.assert_awaited_once_with(interaction.guild_id)

    @pytest.mark.asyncio
    async def test_unknown_name(self, make_interaction) -> None:
        """Test that a name missing from the guild denies."""
        interaction = make_interaction(roles=[2000000000000000002])

        with patch.object(Role, "fetch_all", AsyncMock(return_value=GUILD_ROLES)):
            assert not await interaction_user_have_roles(interaction, {"owner"})

    @pytest.mark.asyncio
    async def test_direct_message(self, make_interaction) -> None:
        """Test that an interaction outside a guild has no roles."""
        interaction = make_interaction(
            member=None,
            guild_id=None,
            user={"id": "1600000000000000006", "username": "tester"},
        )

        assert not await interaction_user_have_roles(interaction, {"admin"})

    @pytest.mark.asyncio
    async def test_lookup_errors_propagate(self, make_interaction) -> None:
        """Test that a failed guild lookup is raised to the caller."""
        interaction = make_interaction(roles=[])

        with patch.object(
            Role, "fetch_all", AsyncMock(side_effect=RuntimeError("unreachable"))
        ):
            with pytest.raises(RuntimeError):
                await interaction_user_have_roles(interaction, {"admin"})
