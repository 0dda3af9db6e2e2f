"""
Pydantic schemas for fleet API endpoints.
"""

from datetime import datetime

from ninja import Schema
from pydantic import Field


class DriverSchema(Schema):
    id: str
    name: str
    created_at: datetime


class VehicleSchema(Schema):
    id: str
    registration: str
    created_at: datetime


class AddDriverRequest(Schema):
    name: str = Field(min_length=1, max_length=255, description="Any casing; stored title-cased")


class AddVehicleRequest(Schema):
    registration: str = Field(
        min_length=1,
        max_length=50,
        description="Any casing and separators; stored as e.g. ABC123XY",
    )


class DriverPage(Schema):
    items: list[DriverSchema]
    next_cursor: str | None = Field(None, description="Pass as ?cursor= to fetch the next page")


class VehiclePage(Schema):
    items: list[VehicleSchema]
    next_cursor: str | None = Field(None, description="Pass as ?cursor= to fetch the next page")


class DriverCreatedResponse(Schema):
    message: str
    driver: DriverSchema


class VehicleCreatedResponse(Schema):
    message: str
    vehicle: VehicleSchema
