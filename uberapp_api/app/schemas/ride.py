"""
Pydantic models for ride data.

Coordinates are decimal degrees; times are epoch milliseconds.
"""

from typing import Optional

from pydantic import Field

from ._base import PayloadModel, ReadModel


class RidePayload(PayloadModel):
    """Schema for requesting or patching a ride."""

    ride_type: Optional[str] = Field(None, examples=["ECONOMY"])
    start_point_lat: Optional[float] = Field(None, examples=[37.4107])
    start_point_long: Optional[float] = Field(None, examples=[-122.0598])
    end_point_lat: Optional[float] = Field(None, examples=[37.3876])
    end_point_long: Optional[float] = Field(None, examples=[-122.0819])
    request_time: Optional[int] = Field(None, examples=[1479500000000])
    pickup_time: Optional[int] = None
    drop_off_time: Optional[int] = None
    status: Optional[str] = Field(None, examples=["REQUESTED"])
    fare: Optional[float] = Field(None, examples=[12.5])
    passenger_id: Optional[str] = None
    driver_id: Optional[str] = None
    car_id: Optional[str] = None


class RideRead(ReadModel):
    """Schema for reading a ride from the API."""

    ride_type: str
    start_point_lat: float
    start_point_long: float
    end_point_lat: float
    end_point_long: float
    request_time: int
    pickup_time: Optional[int] = None
    drop_off_time: Optional[int] = None
    status: str
    fare: Optional[float] = None
    passenger_id: Optional[str] = None
    driver_id: Optional[str] = None
    car_id: Optional[str] = None
