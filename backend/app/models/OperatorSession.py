from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from ..core.database import utcnow

class Token(SQLModel):
    access_token: str # JWT Token
    token_type: str # Token type

class TokenPayload(SQLModel):
    sub: str | None = None # Operator username
    exp: int | None = None # Expiration time
    iat: int | None = None # Issued at time

class OperatorSession(SQLModel, table=True):
    __tablename__ = "operator_sessions"

    id: int | None = Field(default=None, primary_key=True)
    access_token: str = Field(index=True)
    operator_id: int = Field(index=True)
    created_at: NaiveDatetime = Field(default_factory=utcnow, sa_type=DateTime)
    expires_at: NaiveDatetime = Field(sa_type=DateTime)
    is_active: bool = Field(default=True)
