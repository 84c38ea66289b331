from __future__ import annotations
from slashkit.models import ApplicationCommandOptionType, ChannelType
from pydantic import BaseModel, ConfigDict
from typing import TYPE_CHECKING, Protocol, Self
from slashkit.errors import UnknownOptionKind
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum


if TYPE_CHECKING:
    from slashkit.builder import SlashCommandOptionBuilder


__all__ = (
    'OptionConfigurator',
    'OptionKind',
    'OptionSpec',
    'OptionTemplate',
)


class OptionKind(StrEnum):
    ATTACHMENT = 'attachment'
    BOOLEAN = 'boolean'
    CHANNEL = 'channel'
    INTEGER = 'integer'
    NUMBER = 'number'
    MENTIONABLE = 'mentionable'
    STRING = 'string'
    USER = 'user'
    ROLE = 'role'

    @classmethod
    def parse(cls, value: object) -> OptionKind:
        if isinstance(value, cls):
            return value

        if not isinstance(value, str):
            raise UnknownOptionKind(value)

        kind = value.lower()

        if kind == 'decimal':
            return cls.NUMBER

        try:
            return cls(kind)
        except ValueError:
            raise UnknownOptionKind(value) from None

    @property
    def option_type(self) -> ApplicationCommandOptionType:
        return ApplicationCommandOptionType[self.name]


class _Configurable(Protocol):
    def configure(
        self,
        option: SlashCommandOptionBuilder
    ) -> SlashCommandOptionBuilder | None:
        ...


type OptionConfigurator = (
    Callable[[SlashCommandOptionBuilder], SlashCommandOptionBuilder | None] |
    _Configurable
)


class OptionTemplate(BaseModel):
    """declarative option configuration, usable anywhere a configurator is"""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    required: bool = False
    choices: dict[str, str | int | float] | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    channel_types: list[ChannelType] | None = None
    autocomplete: bool = False

    def configure(
        self,
        option: SlashCommandOptionBuilder
    ) -> SlashCommandOptionBuilder:
        option.set_name(self.name).set_description(
            self.description).set_required(self.required)

        if self.choices is not None:
            option.add_choices(self.choices)

        if self.min_value is not None:
            option.set_min_value(self.min_value)

        if self.max_value is not None:
            option.set_max_value(self.max_value)

        if self.min_length is not None:
            option.set_min_length(self.min_length)

        if self.max_length is not None:
            option.set_max_length(self.max_length)

        if self.channel_types is not None:
            option.add_channel_types(*self.channel_types)

        if self.autocomplete:
            option.set_autocomplete(True)

        return option


@dataclass(frozen=True)
class OptionSpec:
    type: OptionKind | str
    handler: OptionConfigurator

    @property
    def kind(self) -> OptionKind:
        return OptionKind.parse(self.type)

    @classmethod
    def of(
        cls,
        type: OptionKind | str,
        name: str,
        description: str,
        **kwargs  # noqa: ANN003
    ) -> Self:
        return cls(
            type=type,
            handler=OptionTemplate(
                name=name,
                description=description,
                **kwargs
            )
        )
