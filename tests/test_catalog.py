"""Tests for category and tag API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from learntrack import models
from tests.conftest import create_test_category, create_test_item


class TestCategories:
    """Test suite for /categories endpoints."""

    def test_create_and_list(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/v1/categories", json={"name": "Cloud", "color": "#10B981"}, headers=auth_headers
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["name"] == "Cloud"

        listed = client.get("/api/v1/categories", headers=auth_headers).json()["categories"]
        assert [c["name"] for c in listed] == ["Cloud"]

    def test_duplicate_name_is_conflict(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_category: models.Category,
    ) -> None:
        response = client.post(
            "/api/v1/categories",
            json={"name": test_category.name, "color": "#000000"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert "already exists" in response.json()["detail"]

    def test_invalid_color(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/v1/categories", json={"name": "Cloud", "color": "green"}, headers=auth_headers
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["details"]["field"] == "color"

    def test_update(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_category: models.Category,
    ) -> None:
        response = client.patch(
            f"/api/v1/categories/{test_category.id}",
            json={"color": "#F59E0B"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": test_category.id,
            "name": test_category.name,
            "color": "#F59E0B",
        }

    def test_rename_to_taken_name(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_category: models.Category,
    ) -> None:
        other = create_test_category(db_session, name="Cloud", color="#fff")

        response = client.patch(
            f"/api/v1/categories/{other.id}",
            json={"name": test_category.name},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_delete_unused(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_category: models.Category,
    ) -> None:
        response = client.delete(f"/api/v1/categories/{test_category.id}", headers=auth_headers)
        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_delete_in_use(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_user: models.User,
        test_category: models.Category,
    ) -> None:
        create_test_item(db_session, test_user, test_category)

        response = client.delete(f"/api/v1/categories/{test_category.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["error"] == "CategoryInUseError"
        assert data["details"]["item_count"] == 1

    def test_delete_missing(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.delete("/api/v1/categories/99999", headers=auth_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_requires_authentication(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestTags:
    """Test suite for /tags endpoints."""

    def test_create_normalizes(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post("/api/v1/tags", json={"name": "  FastAPI "}, headers=auth_headers)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["name"] == "fastapi"

    def test_duplicate_after_normalization_is_conflict(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        client.post("/api/v1/tags", json={"name": "python"}, headers=auth_headers)

        response = client.post("/api/v1/tags", json={"name": "PYTHON"}, headers=auth_headers)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error"] == "TagNameTakenError"

    def test_invalid_name(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/v1/tags", json={"name": "machine learning"}, headers=auth_headers
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_sorted_by_name(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        for name in ("rust", "go", "python"):
            client.post("/api/v1/tags", json={"name": name}, headers=auth_headers)

        tags = client.get("/api/v1/tags", headers=auth_headers).json()["tags"]

        assert [tag["name"] for tag in tags] == ["go", "python", "rust"]

    def test_delete(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_category: models.Category,
    ) -> None:
        created = client.post(
            "/api/v1/items",
            json={"title": "Go in Action", "category_id": test_category.id, "tags": ["go"]},
            headers=auth_headers,
        ).json()
        tag_id = created["tags"][0]["id"]

        response = client.delete(f"/api/v1/tags/{tag_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        item = client.get(f"/api/v1/items/{created['id']}", headers=auth_headers).json()
        assert item["tags"] == []
        assert client.delete(f"/api/v1/tags/{tag_id}", headers=auth_headers).status_code == (
            status.HTTP_404_NOT_FOUND
        )
