"""
Credential resolution: API key header values -> ``UserIdentity``.

The resolver only parses and classifies the header.  Whether a key is
currently issued is decided by a ``CredentialRegistry`` so the backing
store (static config, Redis, ...) can change without touching the rules
below.
"""

from __future__ import annotations

import re
from typing import Iterable, Protocol, Sequence

from .entities import UserIdentity
from .errors import (
    AmbiguousCredential,
    InvalidCredential,
    MalformedCredential,
    MissingCredential,
)

U64_MAX = 2**64 - 1

_UINT_RE = re.compile(r"\+?[0-9]+")


class CredentialRegistry(Protocol):
    async def is_active(self, key: int) -> bool: ...


class StaticCredentialRegistry:
    """Registry over a fixed set of keys, e.g. loaded from settings."""

    def __init__(self, keys: Iterable[int]):
        self.keys = frozenset(keys)

    async def is_active(self, key: int) -> bool:
        return key in self.keys


def parse_key(value: str) -> int:
    """Parse an unsigned 64-bit integer; raise ``MalformedCredential`` otherwise."""
    if not _UINT_RE.fullmatch(value):
        raise MalformedCredential(value)
    key = int(value)
    if key > U64_MAX:
        raise MalformedCredential(value)
    return key


async def resolve_identity(
    values: Sequence[str], registry: CredentialRegistry
) -> UserIdentity:
    """Bind the values of the auth header to a user, or raise a ``CredentialError``."""
    if not values:
        raise MissingCredential()
    if len(values) > 1:
        raise AmbiguousCredential()

    key = parse_key(values[0])
    if not await registry.is_active(key):
        raise InvalidCredential(key)
    return UserIdentity(id=key)
