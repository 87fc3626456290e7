"""
Authorization API: the orchestration every transport goes through.

All account and revocation state is read and written under the store lock
(see core.database.store_guard), so a validation never observes a deletion
halfway through.
"""
import logging
from datetime import datetime

from sqlmodel import Session

from ..accounts import service as store
from ..core.database import store_guard, utcnow
from ..core.errors import DuplicateToken
from ..core.settings import settings
from ..models.Account import Account
from ..models.Decision import DenyReason, ValidationResult
from ..quota.service import authorize, record_usage
from ..revocations.service import revoke, is_revoked

logger = logging.getLogger(__name__)

def create_account(session: Session, username: str, data_limit: int, time_limit: int) -> Account:
    attempts = max(settings.TOKEN_GENERATION_ATTEMPTS, 1)
    with store_guard(session):
        for attempt in range(1, attempts + 1):
            try:
                return store.create(session, username, data_limit, time_limit)
            except DuplicateToken:
                logger.warning("Token collision on attempt %s/%s", attempt, attempts)
        raise DuplicateToken(f"no unique token after {attempts} attempts")

def list_accounts(session: Session) -> list[Account]:
    with store_guard(session):
        return store.list_accounts(session)

def get_account(session: Session, username: str) -> Account:
    with store_guard(session):
        return store.find_by_username(session, username)

def delete_account(session: Session, username: str) -> str:
    """
    Revokes the account's token, then removes the account, in one commit.
    Raises AccountNotFound if no account has this username.
    Returns the revoked token.
    """
    with store_guard(session):
        account = store.find_by_username(session, username)
        account_id, token = account.id, account.token
        revoke(session, token)
        session.flush()
        store.remove(session, account)
        session.commit()
    logger.info("Deleted account id=%s username=%s", account_id, username)
    return token

def validate(session: Session, token: str, now: datetime | None = None) -> ValidationResult:
    """
    Revocation is consulted first so a deleted account's token keeps
    reporting Revoked rather than NotFound.
    """
    now = now or utcnow()
    with store_guard(session):
        revoked = is_revoked(session, token)
        account = store.find_by_token_or_none(session, token)
        if account is None:
            reason = DenyReason.REVOKED if revoked else DenyReason.NOT_FOUND
            result = ValidationResult.unauthorized(reason)
        else:
            result = ValidationResult.from_decision(authorize(account, revoked, now))

    if result.authorized:
        logger.debug("Token authorized")
    else:
        logger.info("Token denied: %s", result.reason.value)
    return result

def report_usage(session: Session, token: str, bytes_used: int, seconds_used: int) -> bool:
    return record_usage(session, token, bytes_used, seconds_used)
