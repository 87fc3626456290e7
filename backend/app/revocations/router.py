from fastapi import APIRouter, Depends, status
import http
from sqlmodel import Session
from ..core.database import get_session, store_guard
from ..core.errors import StoreUnavailable
from ..core.responses import store_unavailable
from ..audit.service import log_event
from ..models.Operator import Operator
from ..models.RevokedToken import RevokedTokenResponse
from ..auth.service import get_current_operator
from .service import list_revoked

router = APIRouter(prefix="/revocations", tags=["revocations"])

@router.get("", response_model=list[RevokedTokenResponse])
async def read_revocations(
    session: Session = Depends(get_session),
    current_operator: Operator = Depends(get_current_operator)
):
    """
    List every revoked token, oldest first (Operator only).
    """
    try:
        with store_guard(session):
            revoked = [RevokedTokenResponse.model_validate(r, from_attributes=True) for r in list_revoked(session)]
    except StoreUnavailable:
        raise store_unavailable()

    action = f"GET /revocations {status.HTTP_200_OK} {http.HTTPStatus(status.HTTP_200_OK).phrase}"
    log_event(session, current_operator.id, action, "Revocations listed successfully")
    return revoked
