"""
Fleet API endpoints.

Members can read the rosters (the report form needs them); admins manage them.
"""

from ninja import Router

from apps.core.auth import request_context
from apps.core.gate import Surface, require_surface
from apps.core.results import unwrap
from apps.core.schemas import ErrorResponse, MessageResponse, RedirectResponse
from apps.core.types import AuthenticatedHttpRequest
from apps.fleet.schemas import (
    AddDriverRequest,
    AddVehicleRequest,
    DriverCreatedResponse,
    DriverPage,
    DriverSchema,
    VehicleCreatedResponse,
    VehiclePage,
    VehicleSchema,
)
from apps.fleet.services import DRIVERS, PAGE_SIZE, VEHICLES

router = Router(tags=["fleet"])

ERRORS = {
    303: RedirectResponse,
    400: ErrorResponse,
    401: ErrorResponse,
    403: ErrorResponse,
    404: ErrorResponse,
    500: ErrorResponse,
}


@router.get(
    "/drivers",
    response={200: list[DriverSchema], **ERRORS},
    operation_id="listDrivers",
    summary="List drivers by name",
)
@require_surface(Surface.ORG_MEMBER)
def list_drivers(request: AuthenticatedHttpRequest) -> list[dict]:
    return unwrap(DRIVERS.list(request_context(request)))


@router.get(
    "/drivers/page",
    response={200: DriverPage, **ERRORS},
    operation_id="pageDrivers",
    summary="Page through drivers, newest first",
)
@require_surface(Surface.ORG_MEMBER)
def page_drivers(
    request: AuthenticatedHttpRequest, cursor: str | None = None, limit: int = PAGE_SIZE
) -> DriverPage:
    page = unwrap(DRIVERS.list_page(request_context(request), cursor=cursor, limit=limit))
    return DriverPage(items=page.items, next_cursor=page.next_cursor)


@router.post(
    "/drivers",
    response={201: DriverCreatedResponse, **ERRORS},
    operation_id="addDriver",
    summary="Add a driver",
)
@require_surface(Surface.ORG_ADMIN)
def add_driver(request: AuthenticatedHttpRequest, payload: AddDriverRequest) -> tuple[int, DriverCreatedResponse]:
    result = DRIVERS.add(request_context(request), payload.name)
    driver = unwrap(result)
    return 201, DriverCreatedResponse(message=result.message, driver=driver)


@router.delete(
    "/drivers/{driver_id}",
    response={200: MessageResponse, **ERRORS},
    operation_id="deleteDriver",
    summary="Delete a driver",
)
@require_surface(Surface.ORG_ADMIN)
def delete_driver(request: AuthenticatedHttpRequest, driver_id: str) -> MessageResponse:
    result = DRIVERS.delete(request_context(request), driver_id)
    unwrap(result)
    return MessageResponse(message=result.message)


@router.get(
    "/vehicles",
    response={200: list[VehicleSchema], **ERRORS},
    operation_id="listVehicles",
    summary="List vehicles by registration",
)
@require_surface(Surface.ORG_MEMBER)
def list_vehicles(request: AuthenticatedHttpRequest) -> list[dict]:
    return unwrap(VEHICLES.list(request_context(request)))


@router.get(
    "/vehicles/page",
    response={200: VehiclePage, **ERRORS},
    operation_id="pageVehicles",
    summary="Page through vehicles, newest first",
)
@require_surface(Surface.ORG_MEMBER)
def page_vehicles(
    request: AuthenticatedHttpRequest, cursor: str | None = None, limit: int = PAGE_SIZE
) -> VehiclePage:
    page = unwrap(VEHICLES.list_page(request_context(request), cursor=cursor, limit=limit))
    return VehiclePage(items=page.items, next_cursor=page.next_cursor)


@router.post(
    "/vehicles",
    response={201: VehicleCreatedResponse, **ERRORS},
    operation_id="addVehicle",
    summary="Add a vehicle",
)
@require_surface(Surface.ORG_ADMIN)
def add_vehicle(
    request: AuthenticatedHttpRequest, payload: AddVehicleRequest
) -> tuple[int, VehicleCreatedResponse]:
    result = VEHICLES.add(request_context(request), payload.registration)
    vehicle = unwrap(result)
    return 201, VehicleCreatedResponse(message=result.message, vehicle=vehicle)


@router.delete(
    "/vehicles/{vehicle_id}",
    response={200: MessageResponse, **ERRORS},
    operation_id="deleteVehicle",
    summary="Delete a vehicle",
)
@require_surface(Surface.ORG_ADMIN)
def delete_vehicle(request: AuthenticatedHttpRequest, vehicle_id: str) -> MessageResponse:
    result = VEHICLES.delete(request_context(request), vehicle_id)
    unwrap(result)
    return MessageResponse(message=result.message)
