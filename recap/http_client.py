"""
Simple async HTTP client with a shared session. We only talk to a handful of
provider APIs so using a single session is OK.
"""

import aiohttp


_session = None


def _get_session():
    global _session

    if _session is None:
        _session = aiohttp.ClientSession()
    return _session


async def post(url, **kwargs) -> tuple[int, dict]:
    """
    Posts to the given url and returns the status code along with the decoded body.
    Error responses are returned as well, it's up to the caller to interpret them.
    """

    session = _get_session()
    async with session.post(url, **kwargs) as response:
        try:
            body = await response.json(content_type=None)
        except ValueError:
            body = {'message': (await response.text()).strip() or response.reason}

        if body is None:
            body = {}
        elif not isinstance(body, dict):
            body = {'data': body}

        return response.status, body


async def close():
    global _session

    if _session is not None:
        await _session.close()

        _session = None


__all__ = ['close', 'post']
