from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List
from ..core.database import get_session
from ..auth.service import get_current_operator
from ..models.Operator import Operator
from ..models.Audit import AuditLog, AuditChainStatus
from .service import get_audit_logs, verify_chain

router = APIRouter(
    prefix="/audit",
    tags=["audit"],
    responses={404: {"description": "Not found"}},
)

@router.get("/log", response_model=List[AuditLog])
def read_audit_logs(
    session: Session = Depends(get_session),
    current_operator: Operator = Depends(get_current_operator)
):
    return get_audit_logs(session)

@router.get("/verify", response_model=AuditChainStatus)
def verify_audit_chain(
    session: Session = Depends(get_session),
    current_operator: Operator = Depends(get_current_operator)
):
    return verify_chain(session)
