"""Shared schema helpers."""

from typing import Annotated

from pydantic import AfterValidator, StringConstraints


def _lower(value: str) -> str:
    return value.lower()


# Company names and product codes are join keys: trimmed and case-normalized
NormalizedKey = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=200),
    AfterValidator(_lower),
]

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
