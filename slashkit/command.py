from __future__ import annotations
from slashkit.option import OptionKind, OptionSpec, OptionConfigurator
from slashkit.roles import RoleOracle, interaction_user_have_roles
from collections.abc import Collection, Iterable, Mapping
from slashkit.builder import SlashCommandBuilder
from typing import TYPE_CHECKING, Any
from functools import cached_property
from dataclasses import dataclass
from copy import deepcopy
import logfire


if TYPE_CHECKING:
    from slashkit.models import Interaction, InteractionCallback, ButtonsCallback


__all__ = (
    'Command',
    'CommandView',
    'DEFAULT_DENIED_MESSAGE',
    'DEFAULT_HANDLER_MESSAGE',
)


DEFAULT_DENIED_MESSAGE = 'You do not have the required roles to use this command.'
DEFAULT_HANDLER_MESSAGE = 'The command has been received, but there is nothing to do...'


@dataclass(frozen=True)
class CommandView:
    command: str
    definition: dict[str, Any]
    handler: InteractionCallback
    buttons_handler: ButtonsCallback
    is_slash_command: bool
    this_object: Command


async def default_handler(interaction: Interaction) -> None:
    await interaction.reply(DEFAULT_HANDLER_MESSAGE, ephemeral=True)


async def default_buttons_handler(_interaction: Interaction) -> int:
    # ? 0 tells the router this command has no buttons
    return 0


class Command:
    """a slash command definition bundled with its role-gated handlers

    the option schema is assembled once at construction, the serialized
    definition is built the first time it's accessed and cached after that.
    an unknown option type raises UnknownOptionKind immediately
    """

    def __init__(
        self,
        name: str,
        description: str,
        handler: InteractionCallback | None = None,
        button_handler: ButtonsCallback | None = None,
        is_slash_command: bool = True,
        options: Iterable[OptionSpec | Mapping[str, Any]] = (),
        required_roles: Collection[int | str] = (),
        denied_message: str | None = None,
        role_oracle: RoleOracle = interaction_user_have_roles
    ) -> None:
        self.command = name
        self.description = description
        self.is_slash_command = is_slash_command
        self.options = tuple(
            option
            if isinstance(option, OptionSpec) else
            OptionSpec(type=option['type'], handler=option['handler'])
            for option in options
        )
        self.required_roles = frozenset(
            (required_roles,)
            if isinstance(required_roles, str) else
            required_roles
        )
        self.denied_message = denied_message or DEFAULT_DENIED_MESSAGE

        self._callback: InteractionCallback = handler or default_handler
        self._buttons_callback: ButtonsCallback = (
            button_handler or default_buttons_handler)
        self._role_oracle = role_oracle

        self._def = SlashCommandBuilder(name, description)
        self.__add_options()

    @property
    def name(self) -> str:
        return self.command

    def __repr__(self) -> str:
        return f'<Command {self.command!r} options={len(self.options)}>'

    def __add_options(self) -> None:
        for option in self.options:
            self.__add_option(option.kind, option.handler)

    def __add_option(
        self,
        kind: OptionKind,
        configurator: OptionConfigurator
    ) -> None:
        match kind:
            case OptionKind.ATTACHMENT:
                self._def.add_attachment_option(configurator)
            case OptionKind.BOOLEAN:
                self._def.add_boolean_option(configurator)
            case OptionKind.CHANNEL:
                self._def.add_channel_option(configurator)
            case OptionKind.INTEGER:
                self._def.add_integer_option(configurator)
            case OptionKind.NUMBER:
                self._def.add_number_option(configurator)
            case OptionKind.MENTIONABLE:
                self._def.add_mentionable_option(configurator)
            case OptionKind.STRING:
                self._def.add_string_option(configurator)
            case OptionKind.USER:
                self._def.add_user_option(configurator)
            case OptionKind.ROLE:
                self._def.add_role_option(configurator)

    @cached_property
    def _definition(self) -> dict[str, Any]:
        return self._def.to_serializable()

    @property
    def definition(self) -> dict[str, Any]:
        # ? the cached dict itself is never handed out
        return deepcopy(self._definition)

    @property
    def public_view(self) -> CommandView:
        return CommandView(
            command=self.command,
            definition=self.definition,
            handler=self.handler,
            buttons_handler=self.buttons_handler,
            is_slash_command=self.is_slash_command,
            this_object=self
        )

    async def handler(self, interaction: Interaction) -> None:
        if self.is_slash_command and self.required_roles:
            if not await self._role_oracle(interaction, self.required_roles):
                logfire.debug(
                    'denied {command_name} to {user_id}',
                    command_name=self.command,
                    user_id=(
                        interaction.author.id
                        if interaction.author is not None else
                        None
                    )
                )
                await interaction.reply(self.denied_message)
                return

        await self._callback(interaction)

    async def buttons_handler(self, interaction: Interaction) -> int:
        return await self._buttons_callback(interaction)
