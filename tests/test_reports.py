"""Tests for report API endpoints."""

from datetime import UTC, date, datetime, timedelta

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from learntrack import models
from tests.conftest import auth_headers_for, create_test_category, create_test_item


@pytest.fixture
def report_items(
    db_session: Session, test_user: models.User, test_category: models.Category
) -> dict[str, models.LearningItem]:
    cloud = create_test_category(db_session, name="Cloud", color="#10B981")
    items = {
        "late": create_test_item(
            db_session,
            test_user,
            test_category,
            title="Late",
            status="Em_Andamento",
            due_date=date.today() - timedelta(days=2),
        ),
        "soon": create_test_item(
            db_session, test_user, cloud, title="Soon", due_date=date.today() + timedelta(days=3)
        ),
        "later": create_test_item(
            db_session, test_user, cloud, title="Later", due_date=date.today() + timedelta(days=40)
        ),
        "done": create_test_item(
            db_session,
            test_user,
            test_category,
            title="Done",
            status="Concluido",
            due_date=date.today() - timedelta(days=9),
        ),
    }
    items["late"].progress = 85.0
    items["soon"].progress = 40.0
    items["done"].progress = 100.0
    for day, item in enumerate(items.values(), start=1):
        item.updated_at = datetime(2024, 1, day, 9, 0, tzinfo=UTC)
    db_session.commit()
    return items


class TestDashboard:
    """Test suite for GET /reports/dashboard endpoint."""

    def test_dashboard_figures(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        report_items: dict[str, models.LearningItem],
    ) -> None:
        response = client.get("/api/v1/reports/dashboard", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total_items"] == 4
        assert data["status_counts"] == [
            {"status": "Backlog", "count": 2},
            {"status": "Em_Andamento", "count": 1},
            {"status": "Pausado", "count": 0},
            {"status": "Concluido", "count": 1},
        ]
        assert [(c["name"], c["count"]) for c in data["category_counts"]] == [
            ("Backend", 2),
            ("Cloud", 2),
        ]
        assert data["average_progress"] == 56.25
        assert [i["title"] for i in data["overdue"]] == ["Late"]
        assert [i["title"] for i in data["due_soon"]] == ["Soon"]
        assert [i["title"] for i in data["near_completion"]] == ["Late"]
        assert data["overdue"][0]["category_name"] == "Backend"
        assert [i["title"] for i in data["recently_updated"]] == ["Done", "Later", "Soon", "Late"]

    def test_dashboard_without_items(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        data = client.get("/api/v1/reports/dashboard", headers=auth_headers).json()

        assert data["total_items"] == 0
        assert data["average_progress"] == 0.0
        assert all(entry["count"] == 0 for entry in data["status_counts"])
        assert data["category_counts"] == []
        assert data["overdue"] == data["due_soon"] == data["recently_updated"] == []

    def test_dashboard_only_counts_own_items(
        self,
        client: TestClient,
        other_user: models.User,
        report_items: dict[str, models.LearningItem],
    ) -> None:
        data = client.get(
            "/api/v1/reports/dashboard", headers=auth_headers_for(other_user)
        ).json()

        assert data["total_items"] == 0
        assert data["overdue"] == []

    def test_requires_authentication(self, client: TestClient) -> None:
        response = client.get("/api/v1/reports/dashboard")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestReportBreakdowns:
    """Test suite for the individual report endpoints."""

    def test_items_by_status_and_category(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        report_items: dict[str, models.LearningItem],
    ) -> None:
        by_status = client.get("/api/v1/reports/items-by-status", headers=auth_headers).json()
        by_category = client.get(
            "/api/v1/reports/items-by-category", headers=auth_headers
        ).json()

        assert {e["status"]: e["count"] for e in by_status["items"]}["Backlog"] == 2
        assert by_category["items"][1] == {
            "category_id": report_items["soon"].category_id,
            "name": "Cloud",
            "color": "#10B981",
            "count": 2,
        }

    def test_top_items_to_complete_skip_finished_items(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        report_items: dict[str, models.LearningItem],
    ) -> None:
        response = client.get(
            "/api/v1/reports/top-items-to-complete?limit=2", headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert [(i["title"], i["progress"]) for i in response.json()["items"]] == [
            ("Late", 85.0),
            ("Soon", 40.0),
        ]

    @pytest.mark.parametrize("limit", [0, 51])
    def test_limit_out_of_range(
        self, client: TestClient, auth_headers: dict[str, str], limit: int
    ) -> None:
        response = client.get(
            f"/api/v1/reports/recently-updated?limit={limit}", headers=auth_headers
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_recently_updated_follows_changes(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        report_items: dict[str, models.LearningItem],
    ) -> None:
        later = report_items["later"]
        client.patch(
            f"/api/v1/items/{later.id}",
            json={"title": "Later, renamed"},
            headers=auth_headers,
        )

        response = client.get("/api/v1/reports/recently-updated?limit=1", headers=auth_headers)

        assert [i["title"] for i in response.json()["items"]] == ["Later, renamed"]
