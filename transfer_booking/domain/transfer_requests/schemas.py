"""Transfer request schemas - Pydantic models for the booking API"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class TransferRequestCreate(CamelModel):
    """
    Booking form submission.
    Dates are kept as submitted and parsed by the service.
    """

    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    date: Optional[str] = None
    return_date: Optional[str] = None
    return_transfer: Optional[bool] = False
    origin_city: Optional[str] = None
    origin_address: Optional[str] = None
    destination_city: Optional[str] = None
    destination_address: Optional[str] = None
    tell_driver: Optional[bool] = False
    vehicle_class: Optional[str] = None
    payment_method: Optional[str] = None  # cash, card, online, other
    comments: Optional[str] = None
    vehicle_id: Optional[int] = None


class TransferRequestUpdate(TransferRequestCreate):
    id: Optional[int] = None
    status: Optional[str] = None


class VehicleResponse(CamelModel):
    id: int
    name: str
    vehicle_class: Optional[str] = None
    passenger_capacity: Optional[int] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class TransferRequestResponse(CamelModel):
    id: int
    customer_name: str
    customer_phone: str
    date: datetime
    return_date: Optional[datetime] = None
    return_transfer: bool
    origin_city: Optional[str] = None
    origin_address: Optional[str] = None
    destination_city: Optional[str] = None
    destination_address: Optional[str] = None
    tell_driver: bool
    vehicle_class: Optional[str] = None
    payment_method: Optional[str] = None
    comments: Optional[str] = None
    status: str
    vehicle_id: Optional[int] = None
    vehicle: Optional[VehicleResponse] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
