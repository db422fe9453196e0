"""
Pydantic models for passenger and driver accounts.

Passengers and drivers share contact and login fields; drivers also
carry licence details.  ``password`` is accepted on input only and is
never part of a read model.
"""

from typing import Optional

from pydantic import Field

from ._base import PayloadModel, ReadModel


class AccountPayload(PayloadModel):
    first_name: Optional[str] = Field(None, examples=["Hector"])
    last_name: Optional[str] = Field(None, examples=["Guo"])
    email_address: Optional[str] = Field(None, examples=["hectorguo@live.com"])
    password: Optional[str] = Field(None, examples=["123456"])
    address_line1: Optional[str] = Field(None, examples=["100N Rd"])
    address_line2: Optional[str] = Field(None, examples=[""])
    city: Optional[str] = Field(None, examples=["Mountain View"])
    state: Optional[str] = Field(None, examples=["CA"])
    zip: Optional[str] = Field(None, examples=["94053"])
    phone_number: Optional[str] = Field(None, examples=["666-777-9999"])


class AccountRead(ReadModel):
    first_name: str
    last_name: str
    email_address: str
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    phone_number: Optional[str] = None


class PassengerPayload(AccountPayload):
    """Schema for creating or patching a passenger."""


class PassengerRead(AccountRead):
    """Schema for reading a passenger from the API."""


class DriverPayload(AccountPayload):
    """Schema for creating or patching a driver."""

    driving_license: Optional[str] = Field(None, examples=["D1234567"])
    licensed_state: Optional[str] = Field(None, examples=["CA"])


class DriverRead(AccountRead):
    """Schema for reading a driver from the API."""

    driving_license: str
    licensed_state: Optional[str] = None
