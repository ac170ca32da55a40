import asyncio

import aiohttp
import pytest
from tenacity import wait_none

from recap.errors import ErrorKind
from recap.logs import EmailRedactor
from recap.modules.sharing.distributor import SummaryDistributor
from recap.modules.sharing.email_client import EmailProviderError, TransientEmailError

summary = '- Ship by Friday\n- Sarah to write release notes'


@pytest.fixture()
def email_client(mocker):
    client = mocker.Mock()
    client.send = mocker.AsyncMock(return_value='email-id')

    return client


@pytest.fixture()
def distributor(email_client):
    return SummaryDistributor(email_client=email_client, subject='Meeting Summary')


class TestShareValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize('raw_recipients', ['', '   ,  ;', [], None, ['', ' ; ']])
    async def test_missing_recipients(self, distributor, email_client, raw_recipients):
        result = await distributor.share(summary, raw_recipients)

        assert not result.delivered
        assert result.error_kind == ErrorKind.VALIDATION
        assert result.message == 'missing recipients'
        email_client.send.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize('summary_text', ['', '   ', None])
    async def test_missing_summary(self, distributor, email_client, summary_text):
        result = await distributor.share(summary_text, 'a@x.com')

        assert not result.delivered
        assert result.error_kind == ErrorKind.VALIDATION
        assert result.message == 'missing summary'
        email_client.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_summary_is_validated_before_recipients(self, distributor):
        result = await distributor.share('', '')

        assert result.message == 'missing summary'


class TestShare:
    @pytest.mark.asyncio
    async def test_sends_once_to_all_parsed_recipients(self, distributor, email_client):
        result = await distributor.share(summary, 'a@x.com, b@y.com; c@z.com  d@w.com')

        assert result.delivered
        assert result.error_kind is None
        email_client.send.assert_awaited_once()

        kwargs = email_client.send.call_args.kwargs

        assert kwargs['recipients'] == ['a@x.com', 'b@y.com', 'c@z.com', 'd@w.com']
        assert kwargs['subject'] == 'Meeting Summary'
        assert kwargs['text'] == summary
        assert '<li>Ship by Friday</li>' in kwargs['html']

    @pytest.mark.asyncio
    async def test_accepts_a_recipient_list(self, distributor, email_client):
        result = await distributor.share(summary, ['a@x.com', 'b@y.com'])

        assert result.delivered
        assert email_client.send.call_args.kwargs['recipients'] == ['a@x.com', 'b@y.com']

    @pytest.mark.asyncio
    async def test_missing_credentials_is_a_configuration_error(self, mocker):
        mocker.patch('recap.modules.sharing.email_client.resend_api_key', None)
        post = mocker.patch('recap.http_client.post', new_callable=mocker.AsyncMock)

        result = await SummaryDistributor().share(summary, 'a@x.com')

        assert not result.delivered
        assert result.error_kind == ErrorKind.CONFIGURATION
        assert 'RESEND_API_KEY' in result.message
        post.assert_not_called()


class TestShareProviderErrors:
    @pytest.mark.asyncio
    async def test_invalid_api_key_is_a_configuration_error(self, distributor, email_client):
        email_client.send.side_effect = EmailProviderError('API key is invalid', name='validation_error', status=403)

        result = await distributor.share(summary, 'a@x.com')

        assert result.error_kind == ErrorKind.CONFIGURATION
        assert result.message == 'API key is invalid'

    @pytest.mark.asyncio
    async def test_testing_mode_is_a_sandbox_restriction(self, distributor, email_client):
        message = (
            'You can only send testing emails to your own email address (owner@example.com). '
            'To send emails to other recipients, please verify a domain at resend.com/domains.'
        )
        email_client.send.side_effect = EmailProviderError(message, name='validation_error', status=403)

        result = await distributor.share(summary, 'someone@else.com')

        assert result.error_kind == ErrorKind.SANDBOX_RESTRICTION
        assert result.message == message

    @pytest.mark.asyncio
    async def test_rejected_recipient_is_a_delivery_error(self, distributor, email_client):
        email_client.send.side_effect = EmailProviderError(
            'Invalid `to` field. The email address needs to follow the `email@example.com` format.',
            name='validation_error',
            status=422,
        )

        result = await distributor.share(summary, 'not-an-address')

        assert result.error_kind == ErrorKind.DELIVERY
        assert result.message.startswith('Invalid `to` field.')

    @pytest.mark.asyncio
    async def test_network_failure_is_a_delivery_error(self, distributor, email_client):
        email_client.send.side_effect = aiohttp.ClientConnectionError('Cannot connect to host api.resend.com')

        result = await distributor.share(summary, 'a@x.com')

        assert result.error_kind == ErrorKind.DELIVERY
        assert 'api.resend.com' in result.message

    @pytest.mark.asyncio
    async def test_timeout_is_a_delivery_error(self, distributor, email_client):
        email_client.send.side_effect = asyncio.TimeoutError()

        result = await distributor.share(summary, 'a@x.com')

        assert result.error_kind == ErrorKind.DELIVERY
        assert result.message == 'email provider timed out'

    @pytest.mark.asyncio
    async def test_unexpected_errors_never_escape(self, distributor, email_client):
        email_client.send.side_effect = RuntimeError('boom')

        result = await distributor.share(summary, 'a@x.com')

        assert not result.delivered
        assert result.error_kind == ErrorKind.DELIVERY
        assert result.message == 'boom'

    @pytest.mark.asyncio
    async def test_unexpected_errors_are_logged_without_addresses(self, distributor, email_client, caplog):
        email_client.send.side_effect = RuntimeError('cannot deliver to sarah@example.com')

        await distributor.share(summary, 'sarah@example.com')

        records = [r for r in caplog.records if r.name == 'recap.modules.sharing.distributor']
        assert records
        for record in records:
            assert record.exc_info is None
            assert EmailRedactor().filter(record)
            assert 'sarah@example.com' not in record.getMessage()

    @pytest.mark.asyncio
    async def test_no_retry_by_default(self, distributor, email_client):
        email_client.send.side_effect = TransientEmailError('Too many requests', name='rate_limit_exceeded', status=429)

        result = await distributor.share(summary, 'a@x.com')

        assert result.error_kind == ErrorKind.DELIVERY
        assert email_client.send.await_count == 1

    @pytest.mark.asyncio
    async def test_transient_errors_are_retried_when_configured(self, email_client, mocker):
        mocker.patch('recap.modules.retry.wait_exponential', return_value=wait_none())
        email_client.send.side_effect = [TransientEmailError('Too many requests', status=429), 'email-id']

        result = await SummaryDistributor(email_client=email_client, retry_attempts=3).share(summary, 'a@x.com')

        assert result.delivered
        assert email_client.send.await_count == 2
