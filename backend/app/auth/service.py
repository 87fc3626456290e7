from datetime import datetime, timedelta
from typing import Annotated
import secrets

from fastapi import Depends, HTTPException, status, Header
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlmodel import Session, select

from ..core.database import get_session, utcnow
from ..core.settings import settings
from ..models.Operator import Operator
from ..models.OperatorSession import TokenPayload, OperatorSession

# Password hashing
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__time_cost=2,
    argon2__memory_cost=102400,
    argon2__parallelism=8
)

# OAuth2 scheme (for extracting token from header)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")

def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password + settings.PASSWORD_PEPPER, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password + settings.PASSWORD_PEPPER)

def create_access_token(session: Session, operator_id: int, data: dict, expires_delta: timedelta | None = None):
    # Reuse a still-valid session instead of minting a new one
    statement = select(OperatorSession).where(
        OperatorSession.operator_id == operator_id,
        OperatorSession.is_active == True,
        OperatorSession.expires_at > utcnow()
    )
    existing = session.exec(statement).first()

    if existing:
        return existing.access_token

    to_encode = data.copy()
    now = utcnow()
    expire = now + (expires_delta or timedelta(minutes=15))
    # jti keeps two tokens minted in the same second distinct
    to_encode.update({"exp": expire, "iat": now, "jti": secrets.token_hex(8)})
    encoded_jwt = jwt.encode(to_encode, settings.SERVER_PRIVATE_KEY, algorithm=settings.ALGORITHM)

    new_session = OperatorSession(
        access_token=encoded_jwt,
        operator_id=operator_id,
        expires_at=expire,
        is_active=True
    )
    session.add(new_session)
    session.commit()

    return encoded_jwt

async def get_current_operator(token: Annotated[str, Depends(oauth2_scheme)], session: Session = Depends(get_session)):
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.SERVER_PUBLIC_KEY, algorithms=[settings.ALGORITHM])
        username: str = payload.get("sub")
        if username is None:
            raise credentials_exception
        token_data = TokenPayload(sub=username)
    except JWTError:
        raise credentials_exception

    # Logged-out sessions stay rejected until the JWT itself expires
    statement = select(OperatorSession).where(
        OperatorSession.access_token == token,
        OperatorSession.is_active == True
    )
    if session.exec(statement).first() is None:
        raise credentials_exception

    statement = select(Operator).where(Operator.username == token_data.sub)
    operator = session.exec(statement).first()
    if operator is None or not operator.is_active:
        raise credentials_exception
    return operator

async def authenticate_operator(session: Session, username: str, password: str):
    statement = select(Operator).where(Operator.username == username)
    operator = session.exec(statement).first()
    if not operator:
        return False
    if not operator.is_active:
        return False
    if not verify_password(password, operator.hashed_password):
        return False
    return operator

def end_session(session: Session, token: str) -> None:
    statement = select(OperatorSession).where(OperatorSession.access_token == token)
    for op_session in session.exec(statement).all():
        op_session.is_active = False
        session.add(op_session)
    session.commit()

async def verify_resolver_key(
    x_resolver_key: Annotated[str | None, Header()] = None
) -> None:
    """
    Guards the resolver-facing endpoints when RESOLVER_API_KEY is configured.
    """
    expected = settings.RESOLVER_API_KEY
    if not expected:
        return None
    if not x_resolver_key or not secrets.compare_digest(x_resolver_key, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid resolver key"
        )
    return None
