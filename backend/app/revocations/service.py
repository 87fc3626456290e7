from sqlmodel import Session, select

from ..models.RevokedToken import RevokedToken

def revoke(session: Session, token: str) -> bool:
    """
    Tombstones a token. Revoking an already revoked token is a no-op.
    Does not commit: the caller owns the transaction.
    Returns True when a new entry was added.
    """
    if session.get(RevokedToken, token):
        return False
    session.add(RevokedToken(token=token))
    return True

def is_revoked(session: Session, token: str) -> bool:
    return session.get(RevokedToken, token) is not None

def list_revoked(session: Session) -> list[RevokedToken]:
    statement = select(RevokedToken).order_by(RevokedToken.revoked_at, RevokedToken.token)
    return list(session.exec(statement).all())
