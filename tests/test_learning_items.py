"""Tests for learning item API endpoints."""

from datetime import date, timedelta

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from learntrack import models
from tests.conftest import (
    auth_headers_for,
    create_test_category,
    create_test_dependency,
    create_test_item,
    create_test_module,
)


class TestCreateLearningItem:
    """Test suite for POST /items endpoint."""

    def test_create_with_tags_and_modules(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_category: models.Category,
    ) -> None:
        """Test creating an item with its tags and modules in one request."""
        response = client.post(
            "/api/v1/items",
            json={
                "title": "Kubernetes in Action",
                "category_id": test_category.id,
                "description_md": "# Notes",
                "tags": ["K8s", "cloud", "k8s"],
                "modules": ["Pods", "Services", "Deployments"],
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["status"] == "Backlog"
        assert data["progress"] == 0.0
        assert [tag["name"] for tag in data["tags"]] == ["k8s", "cloud"]
        assert [m["title"] for m in data["modules"]] == ["Pods", "Services", "Deployments"]
        assert [m["order"] for m in data["modules"]] == [0, 1, 2]
        assert all(m["status"] == "Pendente" for m in data["modules"])

    def test_create_with_unknown_category(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/items",
            json={"title": "Rust Book", "category_id": 99999},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "CategoryNotFoundError"

    def test_create_with_past_due_date(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_category: models.Category,
    ) -> None:
        """Test that domain validation errors carry the field in their details."""
        yesterday = date.today() - timedelta(days=1)
        response = client.post(
            "/api/v1/items",
            json={
                "title": "Rust Book",
                "category_id": test_category.id,
                "due_date": yesterday.isoformat(),
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["error"] == "ValidationError"
        assert data["details"]["field"] == "due_date"
        assert "past" in data["detail"]

    def test_create_with_invalid_tag(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_category: models.Category,
    ) -> None:
        response = client.post(
            "/api/v1/items",
            json={"title": "Rust Book", "category_id": test_category.id, "tags": ["two words"]},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert db_session.query(models.LearningItem).count() == 0

    def test_create_with_blank_title(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_category: models.Category,
    ) -> None:
        response = client.post(
            "/api/v1/items",
            json={"title": "   ", "category_id": test_category.id},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestListAndGetLearningItems:
    """Test suite for GET /items endpoints."""

    def test_list_only_own_items(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_item: models.LearningItem,
        other_user: models.User,
        test_category: models.Category,
    ) -> None:
        create_test_item(db_session, other_user, test_category, title="Not mine")

        response = client.get("/api/v1/items", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        items = response.json()["items"]
        assert [item["id"] for item in items] == [test_item.id]

    def test_list_filters(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_user: models.User,
        test_category: models.Category,
    ) -> None:
        cloud = create_test_category(db_session, name="Cloud", color="#10B981")
        create_test_item(db_session, test_user, test_category, title="Backlog one")
        create_test_item(db_session, test_user, cloud, title="Started", status="Em_Andamento")
        client.post(
            "/api/v1/items",
            json={"title": "Tagged", "category_id": cloud.id, "tags": ["aws"]},
            headers=auth_headers,
        )

        by_status = client.get("/api/v1/items?status=Em_Andamento", headers=auth_headers)
        by_category = client.get(f"/api/v1/items?category_id={cloud.id}", headers=auth_headers)
        by_tag = client.get("/api/v1/items?tag=AWS", headers=auth_headers)

        assert [i["title"] for i in by_status.json()["items"]] == ["Started"]
        assert sorted(i["title"] for i in by_category.json()["items"]) == ["Started", "Tagged"]
        assert [i["title"] for i in by_tag.json()["items"]] == ["Tagged"]

    def test_list_with_invalid_status_filter(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/items?status=Done", headers=auth_headers)
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_get_item_with_modules(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_item: models.LearningItem,
    ) -> None:
        create_test_module(db_session, test_item, title="Second", order=1)
        create_test_module(db_session, test_item, title="First", order=0)

        response = client.get(f"/api/v1/items/{test_item.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert [m["title"] for m in response.json()["modules"]] == ["First", "Second"]

    def test_get_other_users_item_is_not_found(
        self,
        client: TestClient,
        test_item: models.LearningItem,
        other_user: models.User,
    ) -> None:
        response = client.get(f"/api/v1/items/{test_item.id}", headers=auth_headers_for(other_user))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        data = response.json()
        assert data["error"] == "LearningItemNotFoundError"
        assert "not found" in data["detail"]

    def test_due_date_flags(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_user: models.User,
        test_category: models.Category,
    ) -> None:
        overdue = create_test_item(
            db_session, test_user, test_category, due_date=date.today() - timedelta(days=2)
        )
        soon = create_test_item(
            db_session, test_user, test_category, due_date=date.today() + timedelta(days=3)
        )
        finished = create_test_item(
            db_session,
            test_user,
            test_category,
            status="Concluido",
            due_date=date.today() - timedelta(days=2),
        )

        flags = {
            item["id"]: (item["is_overdue"], item["is_due_soon"])
            for item in client.get("/api/v1/items", headers=auth_headers).json()["items"]
        }

        assert flags[overdue.id] == (True, False)
        assert flags[soon.id] == (False, True)
        assert flags[finished.id] == (False, False)


class TestListPaginationAndSorting:
    """Test suite for paging, searching and sorting on GET /items."""

    def test_pages_report_the_total(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_user: models.User,
        test_category: models.Category,
    ) -> None:
        for title in ("A", "B", "C", "D", "E"):
            create_test_item(db_session, test_user, test_category, title=title)

        first = client.get(
            "/api/v1/items?order_by=title&order=asc&page=1&limit=2", headers=auth_headers
        ).json()
        last = client.get(
            "/api/v1/items?order_by=title&order=asc&page=3&limit=2", headers=auth_headers
        ).json()

        assert [i["title"] for i in first["items"]] == ["A", "B"]
        assert (first["total"], first["page"], first["limit"]) == (5, 1, 2)
        assert [i["title"] for i in last["items"]] == ["E"]
        assert last["total"] == 5

    def test_limit_above_maximum_is_rejected(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/items?limit=101", headers=auth_headers)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_unknown_order_by_is_rejected(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/items?order_by=owner", headers=auth_headers)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_search_matches_title_and_description(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_user: models.User,
        test_category: models.Category,
    ) -> None:
        create_test_item(db_session, test_user, test_category, title="Kubernetes Up and Running")
        described = create_test_item(db_session, test_user, test_category, title="Cloud course")
        described.description_md = "Covers KUBERNETES operators"
        db_session.commit()
        create_test_item(db_session, test_user, test_category, title="Clean Code")

        data = client.get(
            "/api/v1/items?search=kubernetes&order_by=title&order=asc", headers=auth_headers
        ).json()

        assert [i["title"] for i in data["items"]] == ["Cloud course", "Kubernetes Up and Running"]
        assert data["total"] == 2

    def test_repeated_tag_matches_any(
        self,
        client: TestClient,
        test_category: models.Category,
        auth_headers: dict[str, str],
    ) -> None:
        for title, tags in (("Go", ["golang"]), ("Rust", ["rust"]), ("SQL", ["databases"])):
            client.post(
                "/api/v1/items",
                json={"title": title, "category_id": test_category.id, "tags": tags},
                headers=auth_headers,
            )

        both = client.get(
            "/api/v1/items?tag=golang&tag=rust&order_by=title&order=asc", headers=auth_headers
        ).json()
        unknown = client.get("/api/v1/items?tag=cobol", headers=auth_headers).json()

        assert [i["title"] for i in both["items"]] == ["Go", "Rust"]
        assert unknown == {"items": [], "total": 0, "page": 1, "limit": 10}

    def test_sort_by_progress_and_due_date(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_user: models.User,
        test_category: models.Category,
    ) -> None:
        low = create_test_item(
            db_session, test_user, test_category, title="Low", due_date=date.today() + timedelta(10)
        )
        high = create_test_item(
            db_session, test_user, test_category, title="High", due_date=date.today() + timedelta(3)
        )
        create_test_item(db_session, test_user, test_category, title="Undated")
        low.progress = 20.0
        high.progress = 80.0
        db_session.commit()

        by_progress = client.get(
            "/api/v1/items?order_by=progress&order=desc", headers=auth_headers
        ).json()
        by_due_date = client.get(
            "/api/v1/items?order_by=due_date&order=asc", headers=auth_headers
        ).json()

        assert [i["title"] for i in by_progress["items"]] == ["High", "Low", "Undated"]
        assert [i["title"] for i in by_due_date["items"]] == ["High", "Low", "Undated"]


class TestUpdateLearningItem:
    """Test suite for PATCH /items/{id} endpoint."""

    def test_update_fields_and_tags(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_item: models.LearningItem,
    ) -> None:
        due = date.today() + timedelta(days=30)
        response = client.patch(
            f"/api/v1/items/{test_item.id}",
            json={"title": "DDIA, 2nd edition", "tags": ["databases"], "due_date": due.isoformat()},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "DDIA, 2nd edition"
        assert [tag["name"] for tag in data["tags"]] == ["databases"]
        assert data["due_date"] == due.isoformat()

    def test_explicit_null_clears_due_date(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_user: models.User,
        test_category: models.Category,
    ) -> None:
        item = create_test_item(
            db_session, test_user, test_category, due_date=date.today() + timedelta(days=5)
        )

        untouched = client.patch(
            f"/api/v1/items/{item.id}", json={"title": "Renamed"}, headers=auth_headers
        )
        cleared = client.patch(
            f"/api/v1/items/{item.id}", json={"due_date": None}, headers=auth_headers
        )

        assert untouched.json()["due_date"] is not None
        assert cleared.json()["due_date"] is None

    def test_update_other_users_item_is_not_found(
        self,
        client: TestClient,
        test_item: models.LearningItem,
        other_user: models.User,
    ) -> None:
        response = client.patch(
            f"/api/v1/items/{test_item.id}",
            json={"title": "Hijacked"},
            headers=auth_headers_for(other_user),
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateLearningItemStatus:
    """Test suite for PATCH /items/{id}/status endpoint."""

    def test_start_item(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_item: models.LearningItem,
    ) -> None:
        response = client.patch(
            f"/api/v1/items/{test_item.id}/status",
            json={"status": "Em_Andamento"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "Em_Andamento"

    def test_completed_item_cannot_be_reopened(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_user: models.User,
        test_category: models.Category,
    ) -> None:
        item = create_test_item(db_session, test_user, test_category, status="Concluido")

        response = client.patch(
            f"/api/v1/items/{item.id}/status",
            json={"status": "Pausado"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["error"] == "InvalidTransitionError"
        assert data["detail"] == "Cannot transition LearningItem from Concluido to Pausado"
        db_session.refresh(item)
        assert item.status == "Concluido"

    def test_unknown_status(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_item: models.LearningItem,
    ) -> None:
        response = client.patch(
            f"/api/v1/items/{test_item.id}/status",
            json={"status": "Finished"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "ValidationError"

    def test_completing_item_without_modules_sets_full_progress(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_item: models.LearningItem,
    ) -> None:
        response = client.patch(
            f"/api/v1/items/{test_item.id}/status",
            json={"status": "Concluido"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["progress"] == 100.0


class TestDeleteLearningItem:
    """Test suite for DELETE /items/{id} endpoint."""

    def test_delete_removes_modules_and_dependencies(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_user: models.User,
        test_category: models.Category,
    ) -> None:
        first = create_test_item(db_session, test_user, test_category, title="First")
        second = create_test_item(db_session, test_user, test_category, title="Second")
        create_test_module(db_session, first)
        create_test_dependency(db_session, second, first)

        response = client.delete(f"/api/v1/items/{first.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert db_session.query(models.Module).count() == 0
        assert db_session.query(models.Dependency).count() == 0
        assert (
            client.get(f"/api/v1/items/{first.id}", headers=auth_headers).status_code
            == status.HTTP_404_NOT_FOUND
        )

    def test_delete_missing_item(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.delete("/api/v1/items/99999", headers=auth_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND


def test_recalculate_progress(
    client: TestClient,
    db_session: Session,
    auth_headers: dict[str, str],
    test_item: models.LearningItem,
) -> None:
    """Test recalculation repairs a stale cached value."""
    for order, module_status in enumerate(["Concluido", "Concluido", "Concluido", "Pendente"]):
        create_test_module(
            db_session, test_item, title=f"M{order}", order=order, status=module_status
        )

    response = client.post(
        f"/api/v1/items/{test_item.id}/progress/recalculate", headers=auth_headers
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "learning_item_id": test_item.id,
        "progress": 75.0,
        "completed_modules": 3,
        "total_modules": 4,
    }
    db_session.refresh(test_item)
    assert test_item.progress == 75.0
