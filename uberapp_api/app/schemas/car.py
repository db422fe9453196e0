"""
Pydantic models for car data.

Example create body::

    {"make": "vw", "model": "beetle", "license": "5PVXXX",
     "carType": "Sedan", "maxPassengers": 4, "color": "white",
     "validRideTypes": "ECONOMY"}
"""

from typing import Optional

from pydantic import Field

from ._base import PayloadModel, ReadModel


class CarPayload(PayloadModel):
    """Schema for creating or patching a car."""

    make: Optional[str] = Field(None, examples=["vw"])
    model: Optional[str] = Field(None, examples=["beetle"])
    license: Optional[str] = Field(None, examples=["5PVXXX"])
    car_type: Optional[str] = Field(None, examples=["Sedan"])
    max_passengers: Optional[int] = Field(None, examples=[4])
    color: Optional[str] = Field(None, examples=["white"])
    valid_ride_types: Optional[str] = Field(None, examples=["ECONOMY"])


class CarRead(ReadModel):
    """Schema for reading a car from the API."""

    make: str
    model: str
    license: str
    car_type: str
    max_passengers: int
    color: Optional[str] = None
    valid_ride_types: str
    driver_id: Optional[str] = None
