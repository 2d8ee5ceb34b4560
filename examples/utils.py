"utility"
from typing import Any

import aiohttp
import requests

from python_graphql_envelope import Request, Response, decode

HEADERS = {"Content-Type": "application/json"}


def execute(endpoint: str, request: Request, target: Any = None) -> Response[Any]:
    "execute graphql request"
    res = requests.post(endpoint, headers=HEADERS, data=request.serialize())
    res.raise_for_status()
    return decode(res.content, target)


async def execute_async(endpoint: str, request: Request, target: Any = None) -> Response[Any]:
    "execute graphql request async"
    async with aiohttp.ClientSession(headers=HEADERS) as session:
        async with session.post(url=endpoint, data=request.serialize()) as response:
            return decode(await response.read(), target)
