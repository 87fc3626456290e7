from typing import Optional
from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel
import hashlib

from ..core.database import utcnow

GENESIS_HASH = "0" * 32

class AuditLog(SQLModel, table=True):
    __tablename__ = "audit_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    timestamp: NaiveDatetime = Field(default_factory=lambda: utcnow().replace(microsecond=0), sa_type=DateTime)
    actor_id: int = Field(index=True)
    action: str
    details: str
    previous_hash: str
    current_hash: str

    def calculate_hash(self) -> str:
        """
        Concatenates previous_hash + timestamp (isoformat) + str(actor_id) + action + details
        and returns the SHA-256 hexdigest.
        """
        # SQLite drops tzinfo, so hash the naive form
        ts_str = self.timestamp.replace(tzinfo=None).isoformat()

        data = (
            self.previous_hash +
            ts_str +
            str(self.actor_id) +
            self.action +
            self.details
        )
        return hashlib.sha256(data.encode("utf-8")).hexdigest()

class AuditChainStatus(SQLModel):
    valid: bool
    entries: int
    broken_at: Optional[int] = None
