from __future__ import annotations
from collections.abc import Collection
from typing import TYPE_CHECKING, Protocol
from slashkit.models import Role
import logfire


if TYPE_CHECKING:
    from slashkit.models import Interaction


__all__ = (
    'RoleOracle',
    'interaction_user_have_roles',
    'split_role_identifiers',
)


class RoleOracle(Protocol):
    async def __call__(
        self,
        interaction: Interaction,
        required_roles: Collection[int | str]
    ) -> bool:
        ...


def split_role_identifiers(
    required_roles: Collection[int | str]
) -> tuple[set[int], set[str]]:
    ids: set[int] = set()
    names: set[str] = set()

    for role in required_roles:
        if isinstance(role, int) or role.isdigit():
            ids.add(int(role))
            continue

        names.add(role.lower())

    return ids, names


async def interaction_user_have_roles(
    interaction: Interaction,
    required_roles: Collection[int | str]
) -> bool:
    """true when the invoking member holds any of the required roles

    roles can be given by id or by name, names are resolved against
    the guild's roles, which are only fetched when a name is given
    """
    if interaction.member is None or interaction.guild_id is None:
        # ? dms and user installs never carry roles
        return False

    member_roles = set(interaction.member.roles)
    ids, names = split_role_identifiers(required_roles)

    if member_roles & ids:
        return True

    if not names:
        return False

    ids |= {
        role.id
        for role in await Role.fetch_all(interaction.guild_id)
        if role.name.lower() in names
    }

    have_roles = bool(member_roles & ids)

    logfire.debug(
        'resolved role names {names} for guild {guild_id}: {have_roles}',
        names=sorted(names),
        guild_id=interaction.guild_id,
        have_roles=have_roles
    )

    return have_roles
