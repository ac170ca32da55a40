import asyncio
from typing import Iterable, Optional

import aiohttp

from recap.env import email_subject
from recap.errors import DeliveryError, RecapError, ValidationError, get_provider_error_message
from recap.logs import get_logger
from recap.modules.monitoring import SHARE_RECIPIENTS_METRIC, SHARE_RESULT_COUNTER
from recap.modules.retry import call_with_retries

from .classification import ClassificationRule, delivery_error_rules, to_error
from .email_client import EmailProviderError, ResendClient, get_email_client, transient_errors
from .recipients import parse_recipients
from .rendering import render_summary_html
from .v1.models import ShareResult

log = get_logger(__name__)


class SummaryDistributor:
    """
    Emails a summary to a list of recipients, one provider call per share.

    Provider failures come back as the error kinds defined by **rules**, anything
    unrecognized is reported as a delivery error.
    """

    def __init__(
        self,
        email_client: Optional[ResendClient] = None,
        rules: Iterable[ClassificationRule] = delivery_error_rules,
        subject: str = email_subject,
        retry_attempts: Optional[int] = None,
    ):
        self.email_client = email_client
        self.rules = tuple(rules)
        self.subject = subject
        self.retry_attempts = retry_attempts

    async def share(self, summary_text: str, raw_recipients: str | Iterable[str] | None) -> ShareResult:
        try:
            await self._share(summary_text, raw_recipients)
        except RecapError as e:
            log.warning(f'Sharing failed with {e.kind.value}: {e.message}')
            SHARE_RESULT_COUNTER.labels(outcome=e.kind.value).inc()

            return ShareResult(delivered=False, error_kind=e.kind, message=e.message)
        except Exception as e:
            log.error(f'Unexpected error while sharing: {e} of type {e.__class__.__name__}')
            SHARE_RESULT_COUNTER.labels(outcome=DeliveryError.kind.value).inc()

            return ShareResult(delivered=False, error_kind=DeliveryError.kind, message=get_provider_error_message(e))

        SHARE_RESULT_COUNTER.labels(outcome='delivered').inc()

        return ShareResult(delivered=True)

    async def _share(self, summary_text: str, raw_recipients: str | Iterable[str] | None) -> None:
        if not summary_text or not summary_text.strip():
            raise ValidationError('missing summary')

        recipients = parse_recipients(raw_recipients)

        if not recipients:
            raise ValidationError('missing recipients')

        client = self.email_client or get_email_client()
        summary = summary_text.strip()

        SHARE_RECIPIENTS_METRIC.observe(len(recipients))

        try:
            await call_with_retries(
                client.send,
                recipients=recipients,
                subject=self.subject,
                html=render_summary_html(summary, title=self.subject),
                text=summary,
                retry_on=transient_errors,
                attempts=self.retry_attempts,
            )
        except EmailProviderError as e:
            raise to_error(e.message, e.name, self.rules) from e
        except aiohttp.ClientError as e:
            raise to_error(get_provider_error_message(e), rules=self.rules) from e
        except asyncio.TimeoutError as e:
            raise DeliveryError('email provider timed out') from e

        log.info(f'Summary of length {len(summary)} shared with {len(recipients)} recipient(s)')


__all__ = ['SummaryDistributor']
