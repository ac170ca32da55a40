import asyncio
from typing import Optional

import aiohttp

from recap import http_client
from recap.env import email_from, provider_timeout, resend_api_base_url, resend_api_key
from recap.errors import ConfigurationError
from recap.logs import get_logger

log = get_logger(__name__)


class EmailProviderError(Exception):
    """
    An error response returned by the email provider.
    """

    def __init__(self, message: str, name: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.name = name
        self.status = status


class TransientEmailError(EmailProviderError):
    """
    Rate limiting or a server side failure, sending again later may succeed.
    """


transient_errors = (TransientEmailError, aiohttp.ClientConnectionError, asyncio.TimeoutError)


class ResendClient:
    """
    Sends emails through the Resend REST API.
    """

    def __init__(
        self,
        api_key: str,
        sender: str = email_from,
        base_url: str = resend_api_base_url,
        timeout: int = provider_timeout,
    ):
        self.api_key = api_key
        self.sender = sender
        self.base_url = base_url
        self.timeout = timeout

    async def send(self, recipients: list[str], subject: str, html: str, text: str) -> Optional[str]:
        status, body = await http_client.post(
            f'{self.base_url}/emails',
            headers={'Authorization': f'Bearer {self.api_key}'},
            json={
                'from': self.sender,
                'to': recipients,
                'subject': subject,
                'html': html,
                'text': text,
            },
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )

        if status >= 400:
            message = body.get('message') or body.get('error') or f'Email provider responded with status {status}'
            name = body.get('name')
            error_cls = TransientEmailError if status == 429 or status >= 500 else EmailProviderError

            raise error_cls(str(message), name=name, status=status)

        email_id = body.get('id')
        log.info(f'Email {email_id} accepted for {len(recipients)} recipient(s)')

        return email_id


def get_email_client() -> ResendClient:
    if not resend_api_key:
        raise ConfigurationError('email service not configured: RESEND_API_KEY is not set')

    return ResendClient(resend_api_key)


__all__ = ['EmailProviderError', 'ResendClient', 'TransientEmailError', 'get_email_client', 'transient_errors']
