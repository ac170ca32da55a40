import asyncio

from recap.logs import get_logger

from .common import close_session, modules

log = get_logger(__name__)


async def main():
    success = True
    tasks = []

    if 'summaries' in modules:
        from .summaries import run as summaries_run

        tasks.append(summaries_run())

    try:
        await asyncio.gather(*tasks)
    except Exception as e:
        log.error(f'E2E run failed: {e}')
        success = False
    finally:
        await close_session()

    if not success:
        raise Exception('E2E tests failed')


asyncio.run(main())
