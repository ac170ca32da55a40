from enum import Enum


class ErrorKind(Enum):
    VALIDATION = 'ValidationError'
    PROVIDER = 'ProviderError'
    CONFIGURATION = 'ConfigurationError'
    SANDBOX_RESTRICTION = 'SandboxRestrictionError'
    DELIVERY = 'DeliveryError'


class RecapError(Exception):
    """
    Base class for the failures a handler converts into an error result.
    The message is shown to the user as is, so provider messages are kept verbatim.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RecapError):
    kind = ErrorKind.VALIDATION


class ProviderError(RecapError):
    kind = ErrorKind.PROVIDER


class ConfigurationError(RecapError):
    kind = ErrorKind.CONFIGURATION


class SandboxRestrictionError(RecapError):
    kind = ErrorKind.SANDBOX_RESTRICTION


class DeliveryError(RecapError):
    kind = ErrorKind.DELIVERY


error_kind_to_exception = {
    ErrorKind.VALIDATION: ValidationError,
    ErrorKind.PROVIDER: ProviderError,
    ErrorKind.CONFIGURATION: ConfigurationError,
    ErrorKind.SANDBOX_RESTRICTION: SandboxRestrictionError,
    ErrorKind.DELIVERY: DeliveryError,
}

error_kind_to_status_code = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.SANDBOX_RESTRICTION: 403,
    ErrorKind.PROVIDER: 502,
    ErrorKind.DELIVERY: 502,
    ErrorKind.CONFIGURATION: 503,
}


def get_provider_error_message(e: Exception) -> str:
    """
    Extracts the most meaningful message out of a provider SDK exception.
    """

    body = getattr(e, 'body', None)

    if isinstance(body, dict) and body.get('message'):
        return str(body['message'])

    return str(e) or e.__class__.__name__


__all__ = [
    'ConfigurationError',
    'DeliveryError',
    'ErrorKind',
    'ProviderError',
    'RecapError',
    'SandboxRestrictionError',
    'ValidationError',
    'error_kind_to_exception',
    'error_kind_to_status_code',
    'get_provider_error_message',
]
