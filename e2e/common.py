from argparse import ArgumentParser

import aiohttp


session = None
parser = ArgumentParser()
parser.add_argument('-u', '--url', dest='url', help='meeting recap url', default='http://localhost:8000')
parser.add_argument(
    '-r',
    '--recipients',
    dest='recipients',
    help='comma separated recipients to share the summary with, sharing is skipped when empty',
    default='',
)
parser.add_argument(
    '-modules',
    '--modules',
    dest='modules',
    help='modules to run e2e on',
    default='summaries,sharing',
)

args = parser.parse_args()
base_url = args.url
recipients = args.recipients
modules = args.modules.split(',')


def get_session():
    global session

    if session is None:
        session = aiohttp.ClientSession()

    return session


async def close_session():
    if session is not None:
        await session.close()


async def post(path, data):
    url = f'{base_url}/{path}'

    return await get_session().post(url, json=data)


async def get(path):
    url = f'{base_url}/{path}'

    return await get_session().get(url)


__all__ = ['close_session', 'get', 'modules', 'post', 'recipients']
