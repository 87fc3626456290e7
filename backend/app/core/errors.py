class DNSGateError(Exception):
    """Base class for errors raised by the access-control core."""


class AccountNotFound(DNSGateError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Account not found: {key}")


class DuplicateToken(DNSGateError):
    """A freshly generated token collided with an existing or revoked one. Retryable."""


class StoreUnavailable(DNSGateError):
    """The underlying database failed. Never retried silently."""
