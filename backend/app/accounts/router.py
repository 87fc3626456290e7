from fastapi import APIRouter, Depends, HTTPException, status
import http
from sqlmodel import Session
from ..core.database import get_session, utcnow
from ..core.errors import AccountNotFound, DuplicateToken, StoreUnavailable
from ..core.responses import store_unavailable
from ..audit.service import log_event
from ..models.Account import AccountCreate, AccountSummary, AccountDetail
from ..models.Operator import Operator
from ..access import service
from ..quota.service import remaining
from ..auth.service import get_current_operator

router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", status_code=status.HTTP_201_CREATED, response_model=AccountSummary)
async def create_account(
    account: AccountCreate,
    session: Session = Depends(get_session),
    current_operator: Operator = Depends(get_current_operator)
):
    """
    Issue a new client token (Operator only).
    """
    try:
        created = AccountSummary.model_validate(
            service.create_account(session, account.username, account.data_limit, account.time_limit),
            from_attributes=True,
        )
    except DuplicateToken:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Could not generate a unique token, retry")
    except StoreUnavailable:
        raise store_unavailable()

    action = f"POST /accounts {status.HTTP_201_CREATED} {http.HTTPStatus(status.HTTP_201_CREATED).phrase}"
    log_event(session, current_operator.id, action, f"Account '{account.username}' created")
    return created

@router.get("", response_model=list[AccountSummary])
async def read_accounts(
    session: Session = Depends(get_session),
    current_operator: Operator = Depends(get_current_operator)
):
    """
    List all accounts in creation order (Operator only).
    """
    try:
        accounts = [AccountSummary.model_validate(a, from_attributes=True) for a in service.list_accounts(session)]
    except StoreUnavailable:
        raise store_unavailable()

    action = f"GET /accounts {status.HTTP_200_OK} {http.HTTPStatus(status.HTTP_200_OK).phrase}"
    log_event(session, current_operator.id, action, "Accounts listed successfully")
    return accounts

@router.get("/{username}", response_model=AccountDetail)
async def read_account(
    username: str,
    session: Session = Depends(get_session),
    current_operator: Operator = Depends(get_current_operator)
):
    """
    Show one account with its usage and remaining quota (Operator only).
    """
    try:
        account = service.get_account(session, username)
    except AccountNotFound:
        raise HTTPException(status_code=404, detail="Account not found")
    except StoreUnavailable:
        raise store_unavailable()

    quota = remaining(account, utcnow())
    return AccountDetail(
        **account.model_dump(),
        data_remaining=quota.data_remaining,
        time_remaining=quota.time_remaining,
    )

@router.delete("/{username}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    username: str,
    session: Session = Depends(get_session),
    current_operator: Operator = Depends(get_current_operator)
):
    """
    Revoke and remove an account (Operator only).
    """
    try:
        service.delete_account(session, username)
    except AccountNotFound:
        action = f"DELETE /accounts/{username} {status.HTTP_404_NOT_FOUND} - Account not found"
        log_event(session, current_operator.id, action)
        raise HTTPException(status_code=404, detail="Account not found")
    except StoreUnavailable:
        raise store_unavailable()

    action = f"DELETE /accounts/{username} {status.HTTP_204_NO_CONTENT} {http.HTTPStatus(status.HTTP_204_NO_CONTENT).phrase}"
    log_event(session, current_operator.id, action, "Account revoked and removed")
    return None
