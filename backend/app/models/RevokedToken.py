from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from ..core.database import utcnow

class RevokedToken(SQLModel, table=True):
    __tablename__ = "revoked_tokens"

    token: str = Field(primary_key=True, description="The client token that is permanently denied.")
    revoked_at: NaiveDatetime = Field(default_factory=utcnow, sa_type=DateTime, description="Time of the first revocation.")

class RevokedTokenResponse(SQLModel):
    token: str
    revoked_at: NaiveDatetime
