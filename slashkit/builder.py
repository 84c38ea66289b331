from __future__ import annotations
from slashkit.models import ApplicationCommand, ApplicationCommandOption, ApplicationCommandOptionChoice, ChannelType
from slashkit.errors import OptionConfigurationError
from slashkit.option import OptionKind
from collections.abc import Mapping
from typing import TYPE_CHECKING, Self


if TYPE_CHECKING:
    from slashkit.option import OptionConfigurator


__all__ = (
    'SlashCommandBuilder',
    'SlashCommandOptionBuilder',
)


CHOICE_KINDS = {OptionKind.STRING, OptionKind.INTEGER, OptionKind.NUMBER}
VALUE_KINDS = {OptionKind.INTEGER, OptionKind.NUMBER}


class SlashCommandOptionBuilder:
    """fluent configuration for a single option of a fixed kind"""

    def __init__(self, kind: OptionKind) -> None:
        self.kind = kind
        self.name: str | None = None
        self.description: str | None = None
        self.required = False
        self.choices: list[ApplicationCommandOptionChoice] | None = None
        self.channel_types: list[ChannelType] | None = None
        self.min_value: int | float | None = None
        self.max_value: int | float | None = None
        self.min_length: int | None = None
        self.max_length: int | None = None
        self.autocomplete = False

    def _require(self, kinds: set[OptionKind], setting: str) -> None:
        if self.kind not in kinds:
            raise OptionConfigurationError(
                f'{setting} is not supported on {self.kind} options')

    def set_name(self, name: str) -> Self:
        self.name = name
        return self

    def set_description(self, description: str) -> Self:
        self.description = description
        return self

    def set_required(self, required: bool = True) -> Self:
        self.required = required
        return self

    def add_choices(
        self,
        choices: Mapping[str, str | int | float] | None = None,
        **kwargs: str | int | float
    ) -> Self:
        self._require(CHOICE_KINDS, 'choices')

        if self.autocomplete:
            raise OptionConfigurationError(
                'choices cannot be combined with autocomplete')

        self.choices = self.choices or []
        for name, value in {**(choices or {}), **kwargs}.items():
            if self.kind == OptionKind.STRING and not isinstance(value, str):
                raise OptionConfigurationError(
                    f'choice {name} must be a string on string options')

            if self.kind == OptionKind.INTEGER and (
                isinstance(value, bool) or not isinstance(value, int)
            ):
                raise OptionConfigurationError(
                    f'choice {name} must be an integer on integer options')

            self.choices.append(
                ApplicationCommandOptionChoice(name=name, value=value))

        return self

    def set_choices(
        self,
        choices: Mapping[str, str | int | float]
    ) -> Self:
        self.choices = None
        return self.add_choices(choices)

    def set_min_value(self, value: int | float) -> Self:
        self._require(VALUE_KINDS, 'min_value')
        self.min_value = value
        return self

    def set_max_value(self, value: int | float) -> Self:
        self._require(VALUE_KINDS, 'max_value')
        self.max_value = value
        return self

    def set_min_length(self, length: int) -> Self:
        self._require({OptionKind.STRING}, 'min_length')
        self.min_length = length
        return self

    def set_max_length(self, length: int) -> Self:
        self._require({OptionKind.STRING}, 'max_length')
        self.max_length = length
        return self

    def add_channel_types(self, *channel_types: ChannelType) -> Self:
        self._require({OptionKind.CHANNEL}, 'channel_types')
        self.channel_types = (self.channel_types or []) + list(channel_types)
        return self

    def set_autocomplete(self, autocomplete: bool = True) -> Self:
        self._require(CHOICE_KINDS, 'autocomplete')

        if autocomplete and self.choices:
            raise OptionConfigurationError(
                'autocomplete cannot be combined with choices')

        self.autocomplete = autocomplete
        return self

    def build(self) -> ApplicationCommandOption:
        if self.name is None or self.description is None:
            raise OptionConfigurationError(
                f'{self.kind} option is missing a name or description')

        return ApplicationCommandOption(
            type=self.kind.option_type,
            name=self.name,
            description=self.description,
            required=self.required,
            choices=self.choices,
            channel_types=self.channel_types,
            min_value=self.min_value,
            max_value=self.max_value,
            min_length=self.min_length,
            max_length=self.max_length,
            autocomplete=self.autocomplete
        )


class SlashCommandBuilder:
    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description
        self.options: list[SlashCommandOptionBuilder] = []

    def _add_option(
        self,
        kind: OptionKind,
        configurator: OptionConfigurator
    ) -> Self:
        option = SlashCommandOptionBuilder(kind)

        configure = getattr(configurator, 'configure', configurator)
        configure(option)

        self.options.append(option)
        return self

    def add_attachment_option(self, configurator: OptionConfigurator) -> Self:
        return self._add_option(OptionKind.ATTACHMENT, configurator)

    def add_boolean_option(self, configurator: OptionConfigurator) -> Self:
        return self._add_option(OptionKind.BOOLEAN, configurator)

    def add_channel_option(self, configurator: OptionConfigurator) -> Self:
        return self._add_option(OptionKind.CHANNEL, configurator)

    def add_integer_option(self, configurator: OptionConfigurator) -> Self:
        return self._add_option(OptionKind.INTEGER, configurator)

    def add_number_option(self, configurator: OptionConfigurator) -> Self:
        return self._add_option(OptionKind.NUMBER, configurator)

    def add_mentionable_option(self, configurator: OptionConfigurator) -> Self:
        return self._add_option(OptionKind.MENTIONABLE, configurator)

    def add_string_option(self, configurator: OptionConfigurator) -> Self:
        return self._add_option(OptionKind.STRING, configurator)

    def add_user_option(self, configurator: OptionConfigurator) -> Self:
        return self._add_option(OptionKind.USER, configurator)

    def add_role_option(self, configurator: OptionConfigurator) -> Self:
        return self._add_option(OptionKind.ROLE, configurator)

    def build(self) -> ApplicationCommand:
        return ApplicationCommand(
            name=self.name,
            description=self.description,
            options=[
                option.build()
                for option in self.options
            ]
        )

    def to_serializable(self) -> dict:
        return self.build().as_registration_dict()
