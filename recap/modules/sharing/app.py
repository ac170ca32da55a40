from recap.env import resend_api_key
from recap.logs import get_logger

from .v1.router import router

log = get_logger(__name__)


async def app_startup():
    if not resend_api_key:
        log.warning('RESEND_API_KEY is not set, sharing will fail until it is configured')

    log.info('sharing module initialized')


__all__ = ['app_startup', 'router']
