"""
Session endpoints for API v1.

Passengers and drivers log in with their email address and password
and receive a signed token carrying their id in the ``userID`` claim.
``GET /sessions/current`` resolves a bearer token back to the account.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from ....core.db import MongoStore, get_store
from ....core.exceptions import AuthenticationError
from ....core.security import create_access_token, get_token_user
from ....schemas.account import DriverRead, PassengerRead
from ....schemas.session import SessionCreate, SessionRead
from ....services.account_service import authenticate, find_account

router = APIRouter()

READ_MODELS = {"passenger": PassengerRead, "driver": DriverRead}


@router.post("", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
def create_session(credentials: SessionCreate, store: MongoStore = Depends(get_store)) -> SessionRead:
    """Exchange credentials for a token; 401 when they do not match."""
    match = authenticate(store, credentials.email_address, credentials.password)
    if match is None:
        raise AuthenticationError("Invalid credentials")
    account_type, account = match
    return SessionRead(
        token=create_access_token(account["id"]),
        user_id=account["id"],
        account_type=account_type,
    )


@router.get("/current")
def current_session(
    user_id: str = Depends(get_token_user),
    store: MongoStore = Depends(get_store),
) -> Dict[str, Any]:
    """Return the account behind the bearer token.

    A valid token for an account deleted since login is rejected with
    401 as well.
    """
    match = find_account(store, user_id)
    if match is None:
        raise AuthenticationError("Account no longer exists")
    account_type, account = match
    read_model = READ_MODELS[account_type]
    return {
        "userID": user_id,
        "accountType": account_type,
        "account": read_model.model_validate(account).model_dump(by_alias=True),
    }
