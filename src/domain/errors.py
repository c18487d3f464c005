"""Exception hierarchy shared by the domain and infrastructure layers."""


class CredentialError(Exception):
    """Base class: the request could not be bound to a user identity."""

    detail = "Invalid credentials"


class MissingCredential(CredentialError):
    detail = "API key header is missing"


class AmbiguousCredential(CredentialError):
    detail = "API key header was supplied more than once"


class MalformedCredential(CredentialError):
    detail = "API key is not an unsigned integer"


class InvalidCredential(CredentialError):
    detail = "API key is not recognised"


class StoreError(Exception):
    """A read or write against a backing store failed."""


class InvalidCoordinate(ValueError):
    """Raised when a latitude / longitude is non-finite or out of range."""
