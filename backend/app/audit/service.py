import logging
from typing import Optional

from sqlmodel import Session, select
from ..core.database import store_lock
from ..models.Audit import AuditLog, AuditChainStatus, GENESIS_HASH

logger = logging.getLogger(__name__)

def log_event(db: Session, actor_id: int, action: str, details: Optional[str] = None) -> AuditLog:
    """
    Logs a new event to the AuditLog chain.
    """
    # Reading the tip and appending must not interleave with another writer
    with store_lock:
        last_entry = db.exec(select(AuditLog).order_by(AuditLog.id.desc())).first()

        previous_hash = last_entry.current_hash if last_entry else GENESIS_HASH

        new_log = AuditLog(
            actor_id=actor_id,
            action=action,
            details=details or "",
            previous_hash=previous_hash,
            current_hash="", # Placeholder, will be calculated
        )
        new_log.current_hash = new_log.calculate_hash()

        db.add(new_log)
        db.commit()
        db.refresh(new_log)

    logger.info("audit actor=%s action=%s %s", actor_id, action, new_log.details)
    return new_log

def get_audit_logs(db: Session) -> list[AuditLog]:
    return list(db.exec(select(AuditLog).order_by(AuditLog.id.asc())).all())

def verify_chain(db: Session) -> AuditChainStatus:
    """
    Recomputes every hash and checks each entry links to its predecessor.
    Reports the id of the first entry that does not.
    """
    entries = get_audit_logs(db)
    previous_hash = GENESIS_HASH
    for entry in entries:
        if entry.previous_hash != previous_hash or entry.calculate_hash() != entry.current_hash:
            return AuditChainStatus(valid=False, entries=len(entries), broken_at=entry.id)
        previous_hash = entry.current_hash
    return AuditChainStatus(valid=True, entries=len(entries))
