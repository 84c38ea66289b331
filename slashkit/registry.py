from __future__ import annotations
from slashkit.errors import CommandNotFound, DuplicateCommand, on_interaction_error
from collections.abc import Callable, Collection, Iterable, Iterator, Mapping
from slashkit.roles import RoleOracle, interaction_user_have_roles
from slashkit.command import Command, CommandView
from slashkit.models import InteractionType
from slashkit.http import Route, request
from slashkit.missing import MISSING
from slashkit.option import OptionSpec
from typing import TYPE_CHECKING, Any
import logfire


if TYPE_CHECKING:
    from slashkit.models import Interaction, InteractionCallback, ButtonsCallback


__all__ = ('CommandRegistry',)


class CommandRegistry:
    def __init__(self, commands: Iterable[Command] = ()) -> None:
        self.__commands: dict[str, Command] = {}
        self.add(*commands)

    def __contains__(self, name: object) -> bool:
        return name in self.__commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self.__commands.values())

    def __len__(self) -> int:
        return len(self.__commands)

    def add(self, *commands: Command) -> None:
        for command in commands:
            if command.command in self.__commands:
                raise DuplicateCommand(command.command)

            self.__commands[command.command] = command

    def get(self, name: str) -> Command | None:
        return self.__commands.get(name)

    def slash_command(
        self,
        name: str,
        description: str,
        options: Iterable[OptionSpec | Mapping[str, Any]] = (),
        required_roles: Collection[int | str] = (),
        denied_message: str | None = None,
        button_handler: ButtonsCallback | None = None,
        is_slash_command: bool = True,
        role_oracle: RoleOracle = interaction_user_have_roles
    ) -> Callable[[InteractionCallback], Command]:
        def decorator(func: InteractionCallback) -> Command:
            command = Command(
                name=name,
                description=description,
                handler=func,
                button_handler=button_handler,
                is_slash_command=is_slash_command,
                options=options,
                required_roles=required_roles,
                denied_message=denied_message,
                role_oracle=role_oracle
            )

            self.add(command)

            return command

        return decorator

    def views(self) -> list[CommandView]:
        return [
            command.public_view
            for command in self.__commands.values()
        ]

    def definitions(self) -> list[dict[str, Any]]:
        return [
            command.definition
            for command in self.__commands.values()
            if command.is_slash_command
        ]

    async def sync(
        self,
        token: str | None = None,
        application_id: int | None = None,
        guild_id: int | None = None
    ) -> list[dict[str, Any]]:
        """overwrite every registered command on discord with the local definitions"""
        definitions = self.definitions()

        route = (
            Route(
                'PUT',
                '/applications/{application_id}/guilds/{guild_id}/commands',
                guild_id=guild_id,
                **({'application_id': application_id} if application_id else {})
            )
            if guild_id is not None else
            Route(
                'PUT',
                '/applications/{application_id}/commands',
                **({'application_id': application_id} if application_id else {})
            )
        )

        with logfire.span(
            'sync {count} commands',
            count=len(definitions),
            guild_id=guild_id
        ):
            return await request(
                route,
                json=definitions,
                token=token or MISSING
            )

    async def dispatch(self, interaction: Interaction) -> None:
        command = self.__commands.get(interaction.command_name or '')

        if command is None:
            raise CommandNotFound(interaction.command_name)

        logfire.debug(
            'dispatching {command_name}',
            command_name=command.command
        )

        await command.handler(interaction)

    async def dispatch_buttons(self, interaction: Interaction) -> int:
        """offer a component interaction to each command in registration order

        the first nonzero code wins, 0 means no command handled it
        """
        for command in self.__commands.values():
            if code := await command.buttons_handler(interaction):
                logfire.debug(
                    '{command_name} handled {custom_id} with code {code}',
                    command_name=command.command,
                    custom_id=interaction.custom_id,
                    code=code
                )
                return code

        return 0

    async def handle(self, interaction: Interaction) -> None:
        try:
            match interaction.type:
                case InteractionType.APPLICATION_COMMAND:
                    await self.dispatch(interaction)
                case InteractionType.MESSAGE_COMPONENT:
                    await self.dispatch_buttons(interaction)
                case _:
                    logfire.debug(
                        'ignoring {interaction_type} interaction',
                        interaction_type=interaction.type.name
                    )
        except Exception as error:
            await on_interaction_error(interaction, error)
