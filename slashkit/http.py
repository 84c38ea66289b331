# The MIT License (MIT)

# Copyright (c) 2015-2021 Rapptz
# Copyright (c) 2021-present Pycord Development

# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:

# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
# OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
# DEALINGS IN THE SOFTWARE.
# ? most of the http stuff is adapted from py-cord
from __future__ import annotations
from slashkit.errors import HTTPException, Forbidden, NotFound, ServerError, Unauthorized
from aiohttp import __version__ as aiohttp_version, ClientResponse, ClientSession
from slashkit.missing import MISSING, MissingOr
from asyncio import sleep, Event, Semaphore
from slashkit.version import VERSION
from dataclasses import dataclass
from orjson import dumps, loads
from urllib.parse import quote
from sys import version_info
from slashkit.env import env
from typing import Any
from time import time


USER_AGENT = ' '.join([
    f'DiscordBot (https://github.com/slashkit/slashkit, {VERSION})',
    f'Python/{'.'.join([str(i) for i in version_info[:3]])}',
    f'aiohttp/{aiohttp_version}'
])

global_limit = Event()
global_limit.set()
__rate_limits: dict[str, RateLimit] = {}
__session: ClientSession | None = None


@dataclass
class RateLimit:
    semaphore: Semaphore
    remaining: int = 1
    reset: float = 0.0

    @property
    def is_reset(self) -> bool:
        return self.reset <= time()

    @property
    def reset_after(self) -> float:
        return max(self.reset - time(), 0)


class Route:
    def __init__(
        self,
        method: str,
        path: str,
        **params  # noqa: ANN003
    ) -> None:
        self.method = method
        self.path = path
        self.token: str | None = None

        if '{application_id}' in path and 'application_id' not in params:
            params['application_id'] = env.bot_id

        self.url = env.discord_url + path.format(**{
            k: quote(v) if isinstance(v, str) else v
            for k, v in params.items()
        })

        # ? interaction tokens expire after 15 minutes, their buckets are never reused
        self.disposable = 'interaction_token' in params
        self.guild_id: int | None = params.get('guild_id')
        self.webhook_id: int | None = (
            params.get('application_id') or
            params.get('interaction_id')
        )

    @property
    def bucket(self) -> str:
        return f'{self.webhook_id}:{self.guild_id}:{self.path}:{self.token}'


def get_session() -> ClientSession:
    global __session

    if __session is None or __session.closed:
        __session = ClientSession()

    return __session


async def close_session() -> None:
    global __session

    if __session is not None and not __session.closed:
        await __session.close()

    __session = None


async def json_or_text(response: ClientResponse) -> Any:  # noqa: ANN401
    text = await response.text(encoding='utf-8')
    if response.headers.get('content-type') == 'application/json':
        return loads(text)

    return text


def update_rate_limit(
    bucket: str,
    remaining: str | None,
    reset: str | None
) -> None:
    rate_limit = __rate_limits.setdefault(bucket, RateLimit(Semaphore(1)))

    if remaining is not None:
        rate_limit.remaining = int(remaining)

    if reset is not None:
        rate_limit.reset = float(reset)


async def _request(
    route: Route,
    *,
    json: dict[str, Any] | list[Any] | None = None,
    reason: str | None = None,
    token: MissingOr[str | None] = MISSING,
) -> Any:  # noqa: ANN401
    route.token = env.bot_token if token is MISSING else token

    rate_limit = __rate_limits.setdefault(route.bucket, RateLimit(Semaphore(1)))

    headers: dict[str, str] = {
        'User-Agent': USER_AGENT
    }

    if route.token:
        headers['Authorization'] = f'Bot {route.token}'

    data = None
    if json is not None:
        headers['Content-Type'] = 'application/json'
        data = dumps(json)

    if reason:
        headers['X-Audit-Log-Reason'] = quote(reason, safe='/ ')

    await global_limit.wait()

    if rate_limit.remaining == 0 and not rate_limit.is_reset:
        await sleep(rate_limit.reset_after)

    response: ClientResponse | None = None

    async with rate_limit.semaphore:
        for tries in range(5):
            async with get_session().request(
                route.method,
                route.url,
                data=data,
                headers=headers
            ) as response:
                update_rate_limit(
                    route.bucket,
                    response.headers.get('X-RateLimit-Remaining'),
                    response.headers.get('X-RateLimit-Reset')
                )

                resp_data = await json_or_text(response)

                if 300 > response.status >= 200:
                    return resp_data

                if response.status == 429 and isinstance(resp_data, dict):
                    is_global = resp_data.get('global', False)
                    if is_global:
                        global_limit.clear()

                    await sleep(resp_data['retry_after'])

                    if is_global:
                        global_limit.set()

                    continue

                if response.status in {500, 502, 503, 504}:
                    await sleep(1 + tries * 2)
                    continue

                match response.status:
                    case 401:
                        raise Unauthorized(resp_data)
                    case 403:
                        raise Forbidden(resp_data)
                    case 404:
                        raise NotFound(resp_data)
                    case _:
                        raise HTTPException(resp_data)

        if response is not None and response.status >= 500:
            raise ServerError(f'{route.method} {route.path} failed after 5 tries')

        raise HTTPException(f'{route.method} {route.path} failed after 5 tries')


async def request(
    route: Route,
    *,
    json: dict[str, Any] | list[Any] | None = None,
    reason: str | None = None,
    token: MissingOr[str | None] = MISSING,
) -> Any:  # noqa: ANN401
    try:
        return await _request(route, json=json, reason=reason, token=token)
    finally:
        if route.disposable:
            __rate_limits.pop(route.bucket, None)
