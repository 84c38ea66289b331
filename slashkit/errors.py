from __future__ import annotations
from typing import TYPE_CHECKING
import logfire


if TYPE_CHECKING:
    from slashkit.models import Interaction


GENERIC_ERROR_MESSAGE = 'an error occurred while running this command'


class SlashkitException(Exception):
    ...


class UnknownOptionKind(SlashkitException, ValueError):
    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f'unknown option type: {kind!r}')


class OptionConfigurationError(SlashkitException, ValueError):
    ...


class DuplicateCommand(SlashkitException, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'command {name} already exists')


class CommandNotFound(SlashkitException, LookupError):
    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f'no command found for {name}')


class InteractionError(SlashkitException):
    """raised by handlers to show the message to the user as-is"""


class HTTPException(SlashkitException):
    status_code: int = 0
    ...


class Unauthorized(HTTPException):
    status_code: int = 401
    ...


class Forbidden(HTTPException):
    status_code: int = 403
    ...


class NotFound(HTTPException):
    status_code: int = 404
    ...


class ServerError(HTTPException):
    status_code: int = 500
    ...


async def on_interaction_error(interaction: Interaction, error: BaseException) -> None:
    expected = isinstance(error, InteractionError)

    if not expected:
        logfire.error(
            'interaction error',
            _exc_info=error.with_traceback(error.__traceback__),
            command_name=interaction.command_name,
            custom_id=interaction.custom_id,
            raw=interaction._raw
        )

    try:
        await interaction.reply(
            str(error) if expected else GENERIC_ERROR_MESSAGE,
            ephemeral=True
        )
    except Exception as reply_error:  # noqa: BLE001
        logfire.error(
            'failed to send error reply',
            _exc_info=reply_error,
            command_name=interaction.command_name,
            custom_id=interaction.custom_id
        )
