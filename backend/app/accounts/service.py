import logging
import secrets

from sqlmodel import Session, select

from ..core.errors import AccountNotFound, DuplicateToken
from ..models.Account import Account, MAX_COUNTER
from ..revocations.service import is_revoked

logger = logging.getLogger(__name__)

TOKEN_BYTES = 16  # 128 bits, 32 hex chars

def generate_token() -> str:
    return secrets.token_hex(TOKEN_BYTES)

def create(session: Session, username: str, data_limit: int, time_limit: int) -> Account:
    """
    Issues a fresh token and persists a new Account with zeroed counters.

    A token that was ever issued, including one sitting in the revocation
    registry, is never handed out again; such a collision raises
    DuplicateToken and the caller retries.
    """
    for limit in (data_limit, time_limit):
        if not 0 <= limit <= MAX_COUNTER:
            raise ValueError(f"Limits must be between 0 and {MAX_COUNTER}")

    token = generate_token()
    if find_by_token_or_none(session, token) or is_revoked(session, token):
        raise DuplicateToken(token)

    account = Account(
        username=username,
        token=token,
        data_limit=data_limit,
        time_limit=time_limit,
    )
    session.add(account)
    session.commit()
    session.refresh(account)
    logger.info("Created account id=%s username=%s", account.id, username)
    return account

def list_accounts(session: Session) -> list[Account]:
    statement = select(Account).order_by(Account.id)
    return list(session.exec(statement).all())

def find_by_username(session: Session, username: str) -> Account:
    # Usernames are labels, not keys: the oldest match wins.
    statement = select(Account).where(Account.username == username).order_by(Account.id)
    account = session.exec(statement).first()
    if not account:
        raise AccountNotFound(username)
    return account

def find_by_token_or_none(session: Session, token: str) -> Account | None:
    statement = select(Account).where(Account.token == token)
    return session.exec(statement).first()

def find_by_token(session: Session, token: str) -> Account:
    account = find_by_token_or_none(session, token)
    if not account:
        raise AccountNotFound(token)
    return account

def remove(session: Session, account: Account) -> None:
    """
    Deletes the account row without committing. Must be sequenced after the
    revocation insert in the same transaction.
    """
    session.delete(account)
