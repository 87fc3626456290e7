import logging
from datetime import datetime

from sqlalchemy import case, update
from sqlmodel import Session

from ..core.database import store_guard
from ..models.Account import Account, MAX_COUNTER
from ..models.Decision import Decision, DenyReason, QuotaStatus

logger = logging.getLogger(__name__)

def elapsed_seconds(account: Account, now: datetime) -> float:
    return (now - account.created_at).total_seconds()

def authorize(account: Account, revoked: bool, now: datetime) -> Decision:
    """
    Pure quota decision. Revocation short-circuits everything else.
    A counter sitting exactly on its limit is already denied.
    """
    if revoked:
        return Decision.deny(DenyReason.REVOKED)

    if account.data_limit != 0 and account.data_consumed >= account.data_limit:
        return Decision.deny(DenyReason.DATA_EXCEEDED)

    # Measured from issuance, not from first use
    if account.time_limit != 0 and elapsed_seconds(account, now) >= account.time_limit:
        return Decision.deny(DenyReason.TIME_EXCEEDED)

    return Decision.allow()

def remaining(account: Account, now: datetime) -> QuotaStatus:
    status = QuotaStatus()
    if account.data_limit != 0:
        status.data_remaining = max(account.data_limit - account.data_consumed, 0)
    if account.time_limit != 0:
        status.time_remaining = max(int(account.time_limit - elapsed_seconds(account, now)), 0)
    return status

def saturating_add(column, amount: int):
    # Pins the counter at MAX_COUNTER instead of overflowing the column
    return case(
        (column > MAX_COUNTER - amount, MAX_COUNTER),
        else_=column + amount,
    )

def record_usage(session: Session, token: str, bytes_used: int, seconds_used: int) -> bool:
    """
    Adds to the account's counters in a single UPDATE so concurrent reports
    never lose increments. A token with no account is silently ignored.
    Returns True if an account was charged.
    """
    if not (0 <= bytes_used <= MAX_COUNTER and 0 <= seconds_used <= MAX_COUNTER):
        raise ValueError(f"Usage increments must be between 0 and {MAX_COUNTER}")

    statement = (
        update(Account)
        .where(Account.token == token)
        .values(
            data_consumed=saturating_add(Account.data_consumed, bytes_used),
            time_consumed=saturating_add(Account.time_consumed, seconds_used),
        )
    )
    with store_guard(session):
        result = session.execute(statement)
        session.commit()

    if result.rowcount == 0:
        logger.debug("Discarded usage report for unknown token")
        return False
    logger.debug("Charged %s bytes, %s seconds", bytes_used, seconds_used)
    return True
