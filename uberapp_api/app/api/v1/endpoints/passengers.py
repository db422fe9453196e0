"""
Passenger endpoints for API v1.

Creating a passenger hashes the password and rejects an email address
already used by any passenger or driver.  Passwords are never returned.
"""

from ....schemas.account import PassengerPayload, PassengerRead
from ....services.account_service import PassengerService
from ._crud import crud_router

router = crud_router(PassengerService, PassengerPayload, PassengerRead)
