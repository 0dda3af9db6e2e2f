"""
Tests for fleet API endpoints.
"""

import pytest
from ninja.errors import HttpError

from apps.core.gate import AuthorizationRedirect
from apps.fleet.api import (
    add_driver,
    add_vehicle,
    delete_vehicle,
    list_drivers,
    page_vehicles,
)
from apps.fleet.schemas import AddDriverRequest, AddVehicleRequest
from tests.fleet.factories import DriverFactory, VehicleFactory


@pytest.mark.django_db
class TestDriverEndpoints:
    def test_admin_adds_driver(self, authenticated_request, admin_member) -> None:
        request = authenticated_request(admin_member, method="post")

        status, response = add_driver(request, AddDriverRequest(name="ada obi"))

        assert status == 201
        assert response.driver.name == "Ada Obi"

    def test_member_cannot_add_driver(self, authenticated_request, member) -> None:
        request = authenticated_request(member, method="post")

        with pytest.raises(AuthorizationRedirect):
            add_driver(request, AddDriverRequest(name="ada obi"))

    def test_member_lists_drivers(self, authenticated_request, member) -> None:
        DriverFactory.create(organization=member.organization, name="Bola")

        result = list_drivers(authenticated_request(member))

        assert [d["name"] for d in result] == ["Bola"]


@pytest.mark.django_db
class TestVehicleEndpoints:
    def test_add_and_delete_vehicle(self, authenticated_request, admin_member) -> None:
        request = authenticated_request(admin_member, method="post")
        _, created = add_vehicle(request, AddVehicleRequest(registration="kdb 404-z"))

        assert created.vehicle.registration == "KDB404Z"

        response = delete_vehicle(authenticated_request(admin_member, method="delete"), created.vehicle.id)
        assert response.message == "vehicle deleted successfully."

    def test_delete_missing_vehicle_is_404(self, authenticated_request, admin_member) -> None:
        with pytest.raises(HttpError) as exc_info:
            delete_vehicle(
                authenticated_request(admin_member, method="delete"),
                "00000000-0000-0000-0000-000000000000",
            )
        assert exc_info.value.status_code == 404

    def test_page_vehicles(self, authenticated_request, member) -> None:
        for _ in range(3):
            VehicleFactory.create(organization=member.organization)

        page = page_vehicles(authenticated_request(member), limit=2)

        assert len(page.items) == 2
        assert page.next_cursor is not None
