"""Profile API tests: own profile, stats, deactivation, and admin management."""

from datetime import UTC, datetime, timedelta

from httpx import AsyncClient


async def test_get_my_profile(client: AsyncClient, auth_headers) -> None:
    response = await client.get("/api/v1/profiles/me", headers=auth_headers)
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["email"] == "alice@example.com"
    assert user["role"] == "user"
    assert user["is_active"] is True
    assert "password" not in user


async def test_update_my_name(client: AsyncClient, auth_headers) -> None:
    response = await client.put(
        "/api/v1/profiles/me", json={"name": "  Alice Cooper "}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Alice Cooper"
    assert response.json()["user"]["email"] == "alice@example.com"


async def test_update_my_email_to_taken_address_conflicts(
    client: AsyncClient, register_and_login
) -> None:
    alice = await register_and_login()
    await register_and_login(email="bob@example.com", name="Bob Example")

    response = await client.put(
        "/api/v1/profiles/me", json={"email": "BOB@example.com"}, headers=alice
    )
    assert response.status_code == 409
    assert response.json()["details"]["field"] == "email"


async def test_update_my_profile_without_fields_rejected(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.put("/api/v1/profiles/me", json={}, headers=auth_headers)
    assert response.status_code == 400


async def test_deactivate_revokes_access(client: AsyncClient, auth_headers) -> None:
    response = await client.delete("/api/v1/profiles/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Account deactivated successfully"

    assert (await client.get("/api/v1/auth/me", headers=auth_headers)).status_code == 401
    login = await client.post(
        "/api/v1/auth/login",
        json={"email": "alice@example.com", "password": "correct-horse-battery"},
    )
    assert login.status_code == 401


async def test_my_stats_counts_recent_completions(
    client: AsyncClient, auth_headers
) -> None:
    deadline = (datetime.now(UTC) + timedelta(days=2)).isoformat()
    for title, status in (("Open", "Pending"), ("Done", "Completed")):
        response = await client.post(
            "/api/v1/tasks",
            json={
                "title": title,
                "description": "Details",
                "deadline": deadline,
                "status": status,
            },
            headers=auth_headers,
        )
        assert response.status_code == 201

    response = await client.get("/api/v1/profiles/me/stats", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["stats"] == {
        "total": 2,
        "pending": 1,
        "in_progress": 0,
        "completed": 1,
        "overdue": 0,
        "due_this_week": 1,
        "recent_completions": 1,
    }


async def test_admin_routes_forbidden_for_users(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.get("/api/v1/profiles", headers=auth_headers)
    assert response.status_code == 403
    response = await client.get("/api/v1/profiles/someone", headers=auth_headers)
    assert response.status_code == 403


async def test_admin_lists_and_filters_users(
    client: AsyncClient, auth_headers, admin_headers
) -> None:
    response = await client.get("/api/v1/profiles", headers=admin_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert data["page"] == 1
    assert {u["email"] for u in data["users"]} == {
        "alice@example.com",
        "admin@example.com",
    }

    await client.delete("/api/v1/profiles/me", headers=auth_headers)
    response = await client.get(
        "/api/v1/profiles", params={"is_active": "false"}, headers=admin_headers
    )
    assert [u["email"] for u in response.json()["users"]] == ["alice@example.com"]


async def test_admin_promotes_user(
    client: AsyncClient, auth_headers, admin_headers
) -> None:
    me = (await client.get("/api/v1/profiles/me", headers=auth_headers)).json()["user"]

    response = await client.put(
        f"/api/v1/profiles/{me['id']}", json={"role": "admin"}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["user"]["role"] == "admin"

    fetched = await client.get(f"/api/v1/profiles/{me['id']}", headers=admin_headers)
    assert fetched.json()["user"]["role"] == "admin"


async def test_admin_rejects_unknown_role(
    client: AsyncClient, auth_headers, admin_headers
) -> None:
    me = (await client.get("/api/v1/profiles/me", headers=auth_headers)).json()["user"]
    response = await client.put(
        f"/api/v1/profiles/{me['id']}", json={"role": "owner"}, headers=admin_headers
    )
    assert response.status_code == 400
    assert response.json()["details"]["field"] == "role"


async def test_admin_missing_user_is_404(client: AsyncClient, admin_headers) -> None:
    response = await client.get("/api/v1/profiles/does-not-exist", headers=admin_headers)
    assert response.status_code == 404
    response = await client.put(
        "/api/v1/profiles/does-not-exist", json={"name": "Ghost"}, headers=admin_headers
    )
    assert response.status_code == 404


async def test_admin_list_huge_page_is_validation_error(
    client: AsyncClient, admin_headers
) -> None:
    response = await client.get(
        "/api/v1/profiles", params={"page": 10**19}, headers=admin_headers
    )
    assert response.status_code == 400
    assert response.json()["details"]["field"] == "page"
