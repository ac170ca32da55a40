from recap.logs import get_logger

from .llm import initialize as initialize_llm
from .v1.router import router

log = get_logger(__name__)


async def app_startup():
    initialize_llm()
    log.info('summaries module initialized')


__all__ = ['app_startup', 'router']
