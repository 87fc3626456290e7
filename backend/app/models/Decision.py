from enum import Enum
from sqlmodel import Field, SQLModel
from .Account import MAX_COUNTER

class DenyReason(str, Enum):
    NOT_FOUND = "NotFound"
    REVOKED = "Revoked"
    DATA_EXCEEDED = "DataExceeded"
    TIME_EXCEEDED = "TimeExceeded"

class Decision(SQLModel):
    """Outcome of the quota check: Allow, or Deny with a reason."""
    allowed: bool
    reason: DenyReason | None = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: DenyReason) -> "Decision":
        return cls(allowed=False, reason=reason)

class ValidationResult(SQLModel):
    """What Validate returns: Authorized, or Unauthorized with a reason."""
    authorized: bool
    reason: DenyReason | None = None

    @classmethod
    def from_decision(cls, decision: Decision) -> "ValidationResult":
        return cls(authorized=decision.allowed, reason=decision.reason)

    @classmethod
    def unauthorized(cls, reason: DenyReason) -> "ValidationResult":
        return cls(authorized=False, reason=reason)

class QuotaStatus(SQLModel):
    # None means unlimited
    data_remaining: int | None = None
    time_remaining: int | None = None

class UsageReport(SQLModel):
    token: str = Field(min_length=1)
    bytes_used: int = Field(default=0, ge=0, le=MAX_COUNTER)
    seconds_used: int = Field(default=0, ge=0, le=MAX_COUNTER)

class ValidateRequest(SQLModel):
    token: str = Field(min_length=1)
