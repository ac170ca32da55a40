"""
Maps email provider failures to the error kinds the UI knows how to react to.

Providers only tell us what went wrong through their error codes and message wording,
so the mapping is a table of rules checked in order. When the provider changes its
wording, only the table needs updating.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from recap.errors import ErrorKind, RecapError, error_kind_to_exception


@dataclass(frozen=True)
class ClassificationRule:
    pattern: re.Pattern
    kind: ErrorKind

    def matches(self, text: str) -> bool:
        return bool(self.pattern.search(text))


def rule(pattern: str, kind: ErrorKind) -> ClassificationRule:
    return ClassificationRule(re.compile(pattern, re.IGNORECASE), kind)


# Resend error names: https://resend.com/docs/api-reference/errors
delivery_error_rules = (
    rule(r'RESEND_API_KEY|missing_api_key|invalid_api_key|api key is invalid|email service', ErrorKind.CONFIGURATION),
    rule(r'restricted_api_key|not configured', ErrorKind.CONFIGURATION),
    rule(r'verify a domain|testing emails|your own email address', ErrorKind.SANDBOX_RESTRICTION),
)


def classify(
    message: str,
    code: Optional[str] = None,
    rules: Iterable[ClassificationRule] = delivery_error_rules,
    default: ErrorKind = ErrorKind.DELIVERY,
) -> ErrorKind:
    text = ' '.join(part for part in (code, message) if part)

    for r in rules:
        if r.matches(text):
            return r.kind

    return default


def to_error(
    message: str,
    code: Optional[str] = None,
    rules: Iterable[ClassificationRule] = delivery_error_rules,
) -> RecapError:
    """
    Builds the error for a provider failure, keeping the provider message as is.
    """

    return error_kind_to_exception[classify(message, code, rules)](message)


__all__ = ['ClassificationRule', 'classify', 'delivery_error_rules', 'rule', 'to_error']
