from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


class Vehicle(Base):
    """Fleet vehicle offered on the booking form (managed outside this service)"""

    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    vehicle_class = Column(String(100), nullable=True)  # standard, comfort, business, minivan
    passenger_capacity = Column(Integer, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    transfer_requests = relationship("TransferRequest", back_populates="vehicle")


class ContactRequest(Base):
    __tablename__ = "contact_requests"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    message = Column(Text, nullable=False)
    status = Column(String(50), default="new", nullable=False, index=True)  # new, contacted, closed
    created_at = Column(DateTime, server_default=func.now(), index=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class TransferRequest(Base):
    __tablename__ = "transfer_requests"

    id = Column(Integer, primary_key=True, index=True)
    customer_name = Column(String(255), nullable=False)
    customer_phone = Column(String(50), nullable=False)
    date = Column(DateTime, nullable=False)  # Pickup date and time
    return_date = Column(DateTime, nullable=True)  # Only set when return_transfer is true
    return_transfer = Column(Boolean, default=False, nullable=False)
    origin_city = Column(String(255), nullable=True)
    origin_address = Column(String(500), nullable=True)
    destination_city = Column(String(255), nullable=True)
    destination_address = Column(String(500), nullable=True)
    tell_driver = Column(Boolean, default=False, nullable=False)  # Destination given at pickup
    vehicle_class = Column(String(100), nullable=True)
    payment_method = Column(String(50), nullable=True)  # cash, card, online, other
    comments = Column(Text, nullable=True)
    status = Column(String(50), default="new", nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), index=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    vehicle = relationship("Vehicle", back_populates="transfer_requests")
