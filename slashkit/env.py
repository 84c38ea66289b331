from base64 import b64decode
from typing import Self
from os import environ

from pydantic import BaseModel
import logfire


DISCORD_URL = 'https://discord.com/api/v10'


class Env(BaseModel):
    bot_token: str = ''
    application_id: int | None = None
    discord_url: str = DISCORD_URL
    logfire_token: str | None = None
    dev: bool = True

    @classmethod
    def new(cls) -> Self:
        return cls.model_validate({
            'bot_token': environ.get('BOT_TOKEN', ''),
            'application_id': environ.get('APPLICATION_ID') or None,
            'discord_url': environ.get('DISCORD_URL', DISCORD_URL),
            'logfire_token': environ.get('LOGFIRE_TOKEN') or None,
            'dev': environ.get('DEV', '1') != '0'
        })

    @property
    def bot_id(self) -> int:
        if self.application_id is not None:
            return self.application_id

        if not self.bot_token:
            raise ValueError('BOT_TOKEN or APPLICATION_ID must be set')

        # ? first token segment is the base64 encoded application id
        return int(
            b64decode(
                self.bot_token.split('.')[0] + '=='
            ).decode()
        )


def configure_logfire(env: Env) -> None:
    logfire.configure(
        token=env.logfire_token,
        send_to_logfire='if-token-present',
        service_name='slashkit',
        environment='dev' if env.dev else 'prod',
        console=None if env.dev else False
    )


env = Env.new()
