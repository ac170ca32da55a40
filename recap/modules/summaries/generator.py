import time
from typing import Optional

import openai
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage

from recap.errors import ProviderError, RecapError, ValidationError, get_provider_error_message
from recap.logs import get_logger
from recap.modules.monitoring import SUMMARY_DURATION_METRIC, SUMMARY_INPUT_LENGTH_METRIC, SUMMARY_RESULT_COUNTER
from recap.modules.retry import call_with_retries

from .llm import get_llm
from .prompts import default_instruction, summary_prompt
from .v1.models import SummaryResult

log = get_logger(__name__)

invalid_response_message = 'invalid response from AI provider'
empty_response_message = 'empty response from AI provider'

# failures worth another attempt when a retry policy is configured
transient_errors = (
    openai.APIConnectionError,
    openai.InternalServerError,
    openai.RateLimitError,
)


def build_messages(transcript: str, instruction: Optional[str] = None) -> list[BaseMessage]:
    instruction = (instruction or '').strip() or default_instruction

    return summary_prompt.format_messages(instruction=instruction, transcript=transcript)


def extract_text(response) -> str:
    content = getattr(response, 'content', None)

    # some providers answer with a list of content blocks
    if isinstance(content, list):
        parts = [part if isinstance(part, str) else part.get('text') for part in content if isinstance(part, (str, dict))]
        content = ''.join(part for part in parts if isinstance(part, str)) if parts else None

    if not isinstance(content, str):
        raise ProviderError(invalid_response_message)

    text = content.strip()

    if not text:
        raise ProviderError(empty_response_message)

    return text


class SummaryGenerator:
    """
    Turns a transcript into a summary using a chat completion model.

    The generator keeps no state between calls, **model** is only used to override
    the configured provider (e.g. with a stub).
    """

    def __init__(self, model: Optional[BaseChatModel] = None, retry_attempts: Optional[int] = None):
        self.model = model
        self.retry_attempts = retry_attempts

    async def generate(self, transcript: str, instruction: Optional[str] = '') -> SummaryResult:
        start = time.perf_counter()

        try:
            summary = await self._generate(transcript, instruction)
        except RecapError as e:
            log.warning(f'Summary failed with {e.kind.value}: {e.message}')
            SUMMARY_RESULT_COUNTER.labels(outcome=e.kind.value).inc()

            return SummaryResult(error_kind=e.kind, message=e.message)
        except Exception as e:
            log.error(f'Unexpected error while summarizing: {e} of type {e.__class__.__name__}')
            SUMMARY_RESULT_COUNTER.labels(outcome=ProviderError.kind.value).inc()

            return SummaryResult(error_kind=ProviderError.kind, message=invalid_response_message)

        duration = time.perf_counter() - start
        SUMMARY_DURATION_METRIC.observe(duration)
        SUMMARY_RESULT_COUNTER.labels(outcome='success').inc()

        log.info(f'Summary generated in {duration:.2f}s, output length: {len(summary)}')

        return SummaryResult(summary_text=summary)

    async def _generate(self, transcript: str, instruction: Optional[str]) -> str:
        if not transcript or not transcript.strip():
            raise ValidationError('missing transcript')

        model = self.model or get_llm()
        messages = build_messages(transcript, instruction)

        SUMMARY_INPUT_LENGTH_METRIC.observe(len(transcript))
        log.info(f'input length: {sum(len(m.content) for m in messages)}')

        try:
            response = await call_with_retries(
                model.ainvoke, messages, retry_on=transient_errors, attempts=self.retry_attempts
            )
        except Exception as e:
            raise ProviderError(get_provider_error_message(e)) from e

        return extract_text(response)


__all__ = ['SummaryGenerator', 'build_messages', 'extract_text']
