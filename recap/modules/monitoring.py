from prometheus_client import Counter, Histogram
from prometheus_fastapi_instrumentator import Instrumentator, metrics

PROMETHEUS_NAMESPACE = 'Recap'
PROMETHEUS_SUMMARIES_SUBSYSTEM = 'Summaries'
PROMETHEUS_SHARING_SUBSYSTEM = 'Sharing'

SUMMARY_INPUT_LENGTH_METRIC = Histogram(
    'summary_input_length',
    documentation='Measures the length of the transcript',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM,
    buckets=[500, 1000, 5000, 10000, 50000, 100000, 500000],
)

SUMMARY_DURATION_METRIC = Histogram(
    'summary_duration_seconds',
    documentation='Measures the duration of the summary inference in seconds',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM,
    buckets=[5**n for n in range(4)],
)

SUMMARY_RESULT_COUNTER = Counter(
    'summary_results',
    documentation='Number of summary requests by outcome',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM,
    labelnames=['outcome'],
)

SHARE_RECIPIENTS_METRIC = Histogram(
    'share_recipients',
    documentation='Number of recipients a summary is sent to',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SHARING_SUBSYSTEM,
    buckets=[1, 2, 5, 10, 25, 50],
)

SHARE_RESULT_COUNTER = Counter(
    'share_results',
    documentation='Number of share requests by outcome',
    namespace=PROMETHEUS_NAMESPACE,
    subsystem=PROMETHEUS_SHARING_SUBSYSTEM,
    labelnames=['outcome'],
)

instrumentator = Instrumentator(
    excluded_handlers=['/healthz', '/metrics'],
)

instrumentator.add(
    metrics.latency(buckets=[n for n in range(1, 6)]),
    metrics.requests(metric_namespace=PROMETHEUS_NAMESPACE),
)

__all__ = [
    'PROMETHEUS_NAMESPACE',
    'PROMETHEUS_SHARING_SUBSYSTEM',
    'PROMETHEUS_SUMMARIES_SUBSYSTEM',
    'SHARE_RECIPIENTS_METRIC',
    'SHARE_RESULT_COUNTER',
    'SUMMARY_DURATION_METRIC',
    'SUMMARY_INPUT_LENGTH_METRIC',
    'SUMMARY_RESULT_COUNTER',
    'instrumentator',
]
