"""
Tests for checklist API endpoints.
"""

import pytest
from ninja.errors import HttpError

from apps.checklists.api import (
    add_category,
    add_item,
    delete_category,
    get_checklist,
    put_checklist,
    reorder_category,
    reorder_item,
    update_item,
)
from apps.checklists.schemas import (
    CategoryRequest,
    ItemRequest,
    ReorderCategoryRequest,
    ReorderItemRequest,
    ReplaceChecklistRequest,
)
from apps.core.gate import AuthorizationRedirect


@pytest.mark.django_db
class TestGetChecklist:
    def test_member_can_read(self, authenticated_request, member) -> None:
        request = authenticated_request(member, path="/api/v1/checklist")

        result = get_checklist(request)

        assert [c.id for c in result.categories] == ["driver", "prime_mover", "trailer_container"]

    def test_super_admin_reads_default(self, request_factory, super_admin) -> None:
        from apps.core.auth import AuthContext
        from tests.accounts.factories import MemberFactory
        from tests.conftest import make_request_with_auth

        # Super-admins acting inside an organization still see the default template
        membership = MemberFactory.create(user=super_admin)
        request = make_request_with_auth(
            request_factory.get("/api/v1/checklist"),
            AuthContext(user=super_admin, member=membership, organization=membership.organization),
        )

        result = get_checklist(request)

        assert len(result.categories) == 3


@pytest.mark.django_db
class TestEditChecklist:
    def test_member_cannot_edit(self, authenticated_request, member) -> None:
        request = authenticated_request(member, method="post", path="/api/v1/checklist/categories")

        with pytest.raises(AuthorizationRedirect):
            add_category(request, CategoryRequest(name="Engine", icon="Cog"))

    def test_admin_adds_category_and_item(self, authenticated_request, admin_member) -> None:
        request = authenticated_request(admin_member, method="post")

        result = add_category(request, CategoryRequest(name="Engine", icon="Cog"))
        new_id = result.categories[-1].id
        result = add_item(request, new_id, ItemRequest(name="Oil level", description="Dipstick"))

        assert result.categories[-1].name == "Engine"
        assert [i.name for i in result.categories[-1].items] == ["Oil level"]

    def test_update_item(self, authenticated_request, admin_member) -> None:
        request = authenticated_request(admin_member, method="patch")

        result = update_item(request, "driver", "driver_ppe", ItemRequest(name="PPE", description=""))

        assert result.categories[0].items[3].name == "PPE"

    def test_delete_unknown_category_is_404(self, authenticated_request, admin_member) -> None:
        request = authenticated_request(admin_member, method="delete")

        with pytest.raises(HttpError) as exc_info:
            delete_category(request, "missing")
        assert exc_info.value.status_code == 404

    def test_reorder_category(self, authenticated_request, admin_member) -> None:
        request = authenticated_request(admin_member, method="post")

        result = reorder_category(request, ReorderCategoryRequest(active_id="trailer_container", over_id="driver"))

        assert [c.id for c in result.categories] == ["trailer_container", "driver", "prime_mover"]

    def test_cross_category_item_move_is_400(self, authenticated_request, admin_member) -> None:
        request = authenticated_request(admin_member, method="post")
        payload = ReorderItemRequest(
            active_category_id="driver",
            active_item_id="driver_ppe",
            over_category_id="prime_mover",
            over_item_id="pm_jack",
        )

        with pytest.raises(HttpError) as exc_info:
            reorder_item(request, payload)
        assert exc_info.value.status_code == 400

    def test_replace_whole_checklist(self, authenticated_request, admin_member) -> None:
        request = authenticated_request(admin_member, method="put")
        payload = ReplaceChecklistRequest(
            categories=[{"id": "only", "name": "Only", "icon": "Wrench", "items": []}]
        )

        result = put_checklist(request, payload)

        assert [c.id for c in result.categories] == ["only"]
        assert [c.id for c in get_checklist(request).categories] == ["only"]


class TestSchemas:
    def test_unknown_icon_rejected(self) -> None:
        with pytest.raises(ValueError):
            CategoryRequest(name="Engine", icon="Rocket")

    def test_duplicate_item_ids_rejected(self) -> None:
        with pytest.raises(ValueError):
            ReplaceChecklistRequest(
                categories=[
                    {"id": "a", "name": "A", "icon": "Cog", "items": [{"id": "i", "name": "x"}]},
                    {"id": "b", "name": "B", "icon": "Cog", "items": [{"id": "i", "name": "y"}]},
                ]
            )
