import asyncio
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recap import http_client
from recap.env import app_port, enable_metrics, metrics_port, modules, ping_message
from recap.logs import get_logger
from recap.modules.monitoring import instrumentator, PROMETHEUS_NAMESPACE
from recap.utils import create_app, create_webserver

log = get_logger(__name__)

if not modules:
    log.warning('No modules enabled!')
    sys.exit(1)

log.info(f'Enabled modules: {modules}')


@asynccontextmanager
async def lifespan(main_app: FastAPI):
    log.info('Meeting Recap is starting')

    if 'summaries' in modules:
        from recap.modules.summaries.app import app_startup as summaries_startup

        await summaries_startup()

    if 'sharing' in modules:
        from recap.modules.sharing.app import app_startup as sharing_startup

        await sharing_startup()

    yield

    log.info('Meeting Recap is shutting down')

    await http_client.close()


app = create_app(lifespan=lifespan)

if 'summaries' in modules:
    from recap.modules.summaries.app import router as summaries_router

    app.include_router(summaries_router, prefix='/api')

if 'sharing' in modules:
    from recap.modules.sharing.app import router as sharing_router

    app.include_router(sharing_router, prefix='/api')

if enable_metrics:
    instrumentator.instrument(app, metric_namespace=PROMETHEUS_NAMESPACE)


@app.get('/api/ping')
def ping():
    return {'message': ping_message}


@app.get('/healthz')
def health():
    return {'status': 'ok'}


async def main():
    tasks = [asyncio.create_task(create_webserver('recap.main:app', port=app_port))]

    if enable_metrics:
        tasks.append(asyncio.create_task(create_webserver('recap.metrics:metrics', port=metrics_port)))

    await asyncio.wait(tasks, return_when=asyncio.ALL_COMPLETED)


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
