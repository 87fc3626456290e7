from datetime import datetime
from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel
from ..core.database import utcnow

# Largest value an SQL BIGINT / SQLite INTEGER holds
MAX_COUNTER = 2 ** 63 - 1

# ==========================================
# SQLModel (Database Entity)
# ==========================================
class Account(SQLModel, table=True):
    __tablename__ = "accounts"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(index=True, nullable=False)  # not unique
    token: str = Field(unique=True, index=True, nullable=False)
    data_limit: int = Field(default=0, ge=0)  # bytes, 0 = unlimited
    time_limit: int = Field(default=0, ge=0)  # seconds, 0 = unlimited
    data_consumed: int = Field(default=0, ge=0)
    time_consumed: int = Field(default=0, ge=0)
    created_at: NaiveDatetime = Field(default_factory=utcnow, sa_type=DateTime)  # UTC

# ==========================================
# Pydantic Models (DTOs)
# ==========================================

# Properties to receive via API on creation (Operator)
class AccountCreate(SQLModel):
    username: str = Field(min_length=1, max_length=64)
    data_limit: int = Field(default=0, ge=0, le=MAX_COUNTER)
    time_limit: int = Field(default=0, ge=0, le=MAX_COUNTER)

# What ListAccounts exposes: no consumption counters
class AccountSummary(SQLModel):
    username: str
    token: str
    data_limit: int
    time_limit: int

class AccountDetail(AccountSummary):
    id: int
    data_consumed: int
    time_consumed: int
    created_at: datetime
    data_remaining: int | None = None
    time_remaining: int | None = None
