from .application_command import *
from .interaction import *
from .member import *
from .enums import *
from .role import *
from .user import *


__all__ = (
    # application_command.py
    'ApplicationCommand',
    'ApplicationCommandOption',
    'ApplicationCommandOptionChoice',
    # enums.py
    'ApplicationCommandOptionType',
    'ApplicationCommandType',
    'ChannelType',
    'ComponentType',
    'InteractionCallbackType',
    'InteractionType',
    'MessageFlag',
    # interaction.py
    'ButtonsCallback',
    'Interaction',
    'InteractionCallback',
    # member.py
    'Member',
    # role.py
    'Role',
    # user.py
    'User',
)
