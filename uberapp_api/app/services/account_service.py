"""
Business logic for passenger and driver accounts.

Both account kinds log in with an email address and a password, so
an address may belong to at most one account across *both*
collections.  Passwords are hashed before they are written, on create
and whenever a patch changes them; the plaintext never reaches the
store.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from ..core.db import MongoStore
from ..core.exceptions import ConflictingUniqueField
from ..core.resources import EMAIL_PATTERN, FieldRule, ResourceRules
from ..core.security import hash_password, verify_password
from .resource_service import ResourceService

logger = logging.getLogger(__name__)

EMAIL_FIELD = "emailAddress"
PASSWORD_FIELD = "password"

ACCOUNT_FIELDS = (
    FieldRule("firstName", required=True),
    FieldRule("lastName", required=True),
    FieldRule(EMAIL_FIELD, required=True, pattern=EMAIL_PATTERN, pattern_hint="is not a valid email address"),
    FieldRule(PASSWORD_FIELD, required=True, min_length=6),
    FieldRule("addressLine1"),
    FieldRule("addressLine2"),
    FieldRule("city"),
    FieldRule("state"),
    FieldRule("zip"),
    FieldRule("phoneNumber"),
)

PASSENGER_RULES = ResourceRules(
    label="Passenger",
    collection="passengers",
    fields=ACCOUNT_FIELDS,
    secret=(PASSWORD_FIELD,),
)

DRIVER_RULES = ResourceRules(
    label="Driver",
    collection="drivers",
    fields=ACCOUNT_FIELDS + (
        FieldRule("drivingLicense", required=True),
        FieldRule("licensedState"),
    ),
    secret=(PASSWORD_FIELD,),
)


class AccountService(ResourceService):
    """Shared behaviour of passengers and drivers."""

    account_type: str

    @classmethod
    def ensure_unique_email(cls, store: MongoStore, email: str, owner_id: Optional[str] = None) -> None:
        """Raise ``ConflictingUniqueField`` if another account uses ``email``.

        ``owner_id`` is the account being updated, which may of course
        keep its own address.
        """
        for service in ACCOUNT_SERVICES:
            for other in service.repository(store).find_by_field(EMAIL_FIELD, email):
                if other["id"] != owner_id:
                    logger.warning(
                        "Rejected %s %s: email already used by %s %s",
                        cls.rules.label, owner_id or "(new)", service.rules.label, other["id"],
                    )
                    raise ConflictingUniqueField(EMAIL_FIELD, email)

    @classmethod
    def prepare_create(cls, store: MongoStore, candidate: Mapping[str, Any]) -> Dict[str, Any]:
        cls.ensure_unique_email(store, candidate[EMAIL_FIELD])
        document = dict(candidate)
        document[PASSWORD_FIELD] = hash_password(candidate[PASSWORD_FIELD])
        return document

    @classmethod
    def prepare_update(
        cls,
        store: MongoStore,
        stored: Mapping[str, Any],
        candidate: Mapping[str, Any],
    ) -> Dict[str, Any]:
        document = dict(candidate)
        if candidate[EMAIL_FIELD] != stored.get(EMAIL_FIELD):
            cls.ensure_unique_email(store, candidate[EMAIL_FIELD], owner_id=stored["id"])
        if candidate[PASSWORD_FIELD] != stored.get(PASSWORD_FIELD):
            document[PASSWORD_FIELD] = hash_password(candidate[PASSWORD_FIELD])
        return document

    @classmethod
    def find_by_email(cls, store: MongoStore, email: str) -> Optional[Dict[str, Any]]:
        matches = cls.repository(store).find_by_field(EMAIL_FIELD, email)
        return matches[0] if matches else None


class PassengerService(AccountService):
    rules = PASSENGER_RULES
    account_type = "passenger"


class DriverService(AccountService):
    rules = DRIVER_RULES
    account_type = "driver"


ACCOUNT_SERVICES: Tuple[Type[AccountService], ...] = (PassengerService, DriverService)


def authenticate(store: MongoStore, email: str, password: str) -> Optional[Tuple[str, Dict[str, Any]]]:
    """Return ``(account_type, account)`` for matching credentials, else ``None``."""
    for service in ACCOUNT_SERVICES:
        account = service.find_by_email(store, email)
        if account is not None and verify_password(password, account.get(PASSWORD_FIELD)):
            return service.account_type, account
    logger.warning("Failed login for %s", email)
    return None


def find_account(store: MongoStore, account_id: str) -> Optional[Tuple[str, Dict[str, Any]]]:
    """Look an account up by id in both collections."""
    for service in ACCOUNT_SERVICES:
        account = service.repository(store).get(account_id)
        if account is not None:
            return service.account_type, account
    return None
