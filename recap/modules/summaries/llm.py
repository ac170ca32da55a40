from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import ChatOpenAI

from recap.env import (
    openai_api_base_url,
    openai_api_key,
    openai_max_completion_tokens,
    openai_model,
    openai_temperature,
    provider_timeout,
)
from recap.errors import ConfigurationError
from recap.logs import get_logger

llm = None
log = get_logger(__name__)


def is_configured() -> bool:
    # an OpenAI compatible server (e.g. ollama) does not need a key
    return bool(openai_api_key or openai_api_base_url)


def initialize() -> BaseChatModel | None:
    global llm

    if not is_configured():
        log.warning('OPENAI_API_KEY is not set, summaries will fail until it is configured')
        return None

    llm = ChatOpenAI(
        api_key=openai_api_key or 'placeholder',  # use a placeholder value to bypass validation for custom base urls
        base_url=openai_api_base_url,
        max_completion_tokens=openai_max_completion_tokens,
        max_retries=0,
        model=openai_model,
        temperature=openai_temperature,
        timeout=provider_timeout,
    )

    log.info(f'Using {openai_model} for summaries{" at " + openai_api_base_url if openai_api_base_url else ""}')

    return llm


def get_llm() -> BaseChatModel:
    if llm is not None:
        return llm

    # the missing key was already reported at startup
    if not is_configured():
        raise ConfigurationError('AI provider not configured: OPENAI_API_KEY is not set')

    return initialize()


__all__ = ['get_llm', 'initialize', 'is_configured']
