from .command import Command, CommandView, DEFAULT_DENIED_MESSAGE, DEFAULT_HANDLER_MESSAGE
from .builder import SlashCommandBuilder, SlashCommandOptionBuilder
from .option import OptionKind, OptionSpec, OptionTemplate
from .roles import interaction_user_have_roles
from .registry import CommandRegistry
from .version import VERSION
from .errors import (
    CommandNotFound,
    DuplicateCommand,
    InteractionError,
    OptionConfigurationError,
    SlashkitException,
    UnknownOptionKind
)
from .models import * # noqa: F403


__all__ = (
    'Command',
    'CommandNotFound',
    'CommandRegistry',
    'CommandView',
    'DEFAULT_DENIED_MESSAGE',
    'DEFAULT_HANDLER_MESSAGE',
    'DuplicateCommand',
    'InteractionError',
    'OptionConfigurationError',
    'OptionKind',
    'OptionSpec',
    'OptionTemplate',
    'SlashCommandBuilder',
    'SlashCommandOptionBuilder',
    'SlashkitException',
    'UnknownOptionKind',
    'VERSION',
    'interaction_user_have_roles',
)
