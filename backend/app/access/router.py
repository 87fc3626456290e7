from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlmodel import Session
from ..core.database import get_session
from ..core.errors import StoreUnavailable
from ..core.responses import store_unavailable
from ..models.Decision import DenyReason, UsageReport, ValidateRequest, ValidationResult
from ..auth.service import verify_resolver_key
from . import service

# Hot path for the DNS resolver: no audit entries here, only logging.
router = APIRouter(
    prefix="/access",
    tags=["access"],
    dependencies=[Depends(verify_resolver_key)],
)

@router.post("/validate", response_model=ValidationResult)
async def validate_token(
    request: ValidateRequest,
    session: Session = Depends(get_session)
):
    """
    Is this token allowed to resolve right now?
    200 when authorized, 404 for an unknown token, 403 for any other denial.
    """
    try:
        result = service.validate(session, request.token)
    except StoreUnavailable:
        raise store_unavailable()

    if result.authorized:
        return result
    code = status.HTTP_404_NOT_FOUND if result.reason == DenyReason.NOT_FOUND else status.HTTP_403_FORBIDDEN
    raise HTTPException(status_code=code, detail=result.model_dump(mode="json"))

@router.post("/usage", status_code=status.HTTP_204_NO_CONTENT)
async def report_usage(
    report: UsageReport,
    session: Session = Depends(get_session)
):
    """
    Charge bytes and seconds to a token after a query was served.
    Unknown tokens are acknowledged and ignored.
    """
    try:
        service.report_usage(session, report.token, report.bytes_used, report.seconds_used)
    except StoreUnavailable:
        raise store_unavailable()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
