import re
from typing import Iterable

separators = re.compile(r'[\s,;]+')


def parse_recipients(raw: str | Iterable[str] | None) -> list[str]:
    """
    Splits free-form input on whitespace, commas and semicolons.

    Order is preserved, blanks are dropped and duplicates are kept. Addresses are not
    validated here, the email provider is the one deciding what a valid address is.
    """

    if raw is None:
        return []

    if isinstance(raw, str):
        chunks = [raw]
    else:
        chunks = [chunk for chunk in raw if isinstance(chunk, str)]

    return [token.strip() for chunk in chunks for token in separators.split(chunk) if token.strip()]


__all__ = ['parse_recipients']
