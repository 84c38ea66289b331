from __future__ import annotations
from .enums import ApplicationCommandType, ApplicationCommandOptionType, ChannelType
from pydantic import Field, field_validator
from regex import match as regex_match
from .base import RawBaseModel


__all__ = (
    'ApplicationCommand',
    'ApplicationCommandOption',
    'ApplicationCommandOptionChoice',
)


COMMAND_NAME_PATTERN = r'^[-_\p{L}\p{N}\p{sc=Deva}\p{sc=Thai}]{1,32}$'


def _validate_name(name: str) -> str:
    if regex_match(COMMAND_NAME_PATTERN, name) is None or name != name.lower():
        raise ValueError(
            f'invalid name {name!r}, must be 1-32 lowercase letters, numbers, - or _')

    return name


class ApplicationCommandOptionChoice(RawBaseModel):
    name: str = Field(min_length=1, max_length=100)
    name_localizations: dict[str, str] | None = None
    value: str | int | float


class ApplicationCommandOption(RawBaseModel):
    type: ApplicationCommandOptionType
    name: str
    name_localizations: dict[str, str] | None = None
    description: str = Field(min_length=1, max_length=100)
    description_localizations: dict[str, str] | None = None
    required: bool = False
    choices: list[ApplicationCommandOptionChoice] | None = Field(None, max_length=25)
    channel_types: list[ChannelType] | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None
    min_length: int | None = Field(None, ge=0, le=6000)
    max_length: int | None = Field(None, ge=1, le=6000)
    autocomplete: bool = False

    @field_validator('name')
    @classmethod
    def check_name(cls, name: str) -> str:
        return _validate_name(name)

    def as_registration_dict(self) -> dict:
        json: dict = {
            'type': self.type.value,
            'name': self.name,
            'description': self.description,
        }

        if self.required:
            json['required'] = True

        if self.choices is not None:
            json['choices'] = [
                choice.model_dump(mode='json', exclude_none=True)
                for choice in self.choices
            ]

        if self.channel_types is not None:
            json['channel_types'] = [
                channel_type.value
                for channel_type in self.channel_types
            ]

        for field in ('min_value', 'max_value', 'min_length', 'max_length'):
            if (value := getattr(self, field)) is not None:
                json[field] = value

        if self.autocomplete:
            json['autocomplete'] = True

        if self.name_localizations is not None:
            json['name_localizations'] = self.name_localizations

        if self.description_localizations is not None:
            json['description_localizations'] = self.description_localizations

        return json


class ApplicationCommand(RawBaseModel):
    type: ApplicationCommandType = ApplicationCommandType.CHAT_INPUT
    name: str
    name_localizations: dict[str, str] | None = None
    description: str = Field(min_length=1, max_length=100)
    description_localizations: dict[str, str] | None = None
    options: list[ApplicationCommandOption] = Field([], max_length=25)
    nsfw: bool | None = None

    @field_validator('name')
    @classmethod
    def check_name(cls, name: str) -> str:
        return _validate_name(name)

    @field_validator('options')
    @classmethod
    def check_required_first(
        cls,
        options: list[ApplicationCommandOption]
    ) -> list[ApplicationCommandOption]:
        # ? discord rejects required options declared after optional ones
        seen_optional = False
        for option in options:
            if not option.required:
                seen_optional = True
                continue

            if seen_optional:
                raise ValueError(
                    f'required option {option.name} must come before optional options')

        return options

    def as_registration_dict(self) -> dict:
        json: dict = {
            'name': self.name,
            'description': self.description,
            'type': self.type.value,
            'options': [
                option.as_registration_dict()
                for option in self.options
            ]
        }

        if self.name_localizations is not None:
            json['name_localizations'] = self.name_localizations

        if self.description_localizations is not None:
            json['description_localizations'] = self.description_localizations

        if self.nsfw is not None:
            json['nsfw'] = self.nsfw

        return json
