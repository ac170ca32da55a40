from recap.env import enable_metrics
from recap.logs import get_logger
from recap.modules.monitoring import instrumentator
from recap.utils import create_app

log = get_logger(__name__)
metrics = create_app()

if enable_metrics:

    @metrics.get('/healthz')
    def health():
        '''
        Health checking.
        '''

        return {'status': 'ok'}

    instrumentator.expose(metrics)
