from datetime import timedelta
import http
from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from ..core.database import get_session
from ..core.settings import settings
from ..models.Operator import LoginRequest, Operator
from ..models.OperatorSession import Token
from .service import authenticate_operator, create_access_token, get_current_operator, end_session, oauth2_scheme
from ..audit.service import log_event

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login", response_model=Token)
async def login(login_data: LoginRequest, session: Session = Depends(get_session)):
    """
    Login with operator username and password to get an access token.
    """
    operator = await authenticate_operator(session, login_data.username, login_data.password)

    if not operator:
        action = f"POST /auth/login {status.HTTP_401_UNAUTHORIZED} {http.HTTPStatus(status.HTTP_401_UNAUTHORIZED).phrase}"
        log_event(session, 0, action, f"Failed login for '{login_data.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        session=session,
        operator_id=operator.id,
        data={"sub": operator.username},
        expires_delta=access_token_expires
    )
    action = f"POST /auth/login {status.HTTP_200_OK} {http.HTTPStatus(status.HTTP_200_OK).phrase}"
    log_event(session, operator.id, action, "Login successful")
    return Token(access_token=access_token, token_type="bearer")


@router.post("/logout")
async def logout(
    current_operator: Annotated[Operator, Depends(get_current_operator)],
    token: Annotated[str, Depends(oauth2_scheme)],
    session: Session = Depends(get_session)
):
    """
    Logout the current operator and invalidate the session token.
    """
    end_session(session, token)
    action = f"POST /auth/logout {status.HTTP_200_OK} {http.HTTPStatus(status.HTTP_200_OK).phrase}"
    log_event(session, current_operator.id, action, "Logged out successfully")
    return {"message": "Logged out successfully"}
