"""HTTP tests for /jobs."""

from __future__ import annotations

from fastapi.testclient import TestClient

J1 = {"id": 1, "title": "j1", "salary": 1, "equity": None, "companyHandle": "c1"}
J2 = {"id": 2, "title": "j2", "salary": 2, "equity": None, "companyHandle": "c2"}

NEW_JOB = {"title": "new", "salary": 100, "equity": "0.5", "companyHandle": "c1"}


def test_create(client: TestClient, fake_db, admin_headers):
    fake_db.returns({**J1, "id": 9, "title": "new", "salary": 100})

    response = client.post("/jobs", json=NEW_JOB, headers=admin_headers)

    assert response.status_code == 201
    assert response.json()["job"]["id"] == 9
    title, salary, equity, company_handle = fake_db.calls[0][1]
    assert (title, salary, str(equity), company_handle) == ("new", 100, "0.5", "c1")


def test_create_requires_admin(client: TestClient, fake_db, user_headers):
    response = client.post("/jobs", json=NEW_JOB, headers=user_headers)

    assert response.status_code == 401
    assert fake_db.calls == []


def test_create_equity_out_of_range(client: TestClient, fake_db, admin_headers):
    response = client.post("/jobs", json={**NEW_JOB, "equity": "1.5"}, headers=admin_headers)

    assert response.status_code == 422
    assert fake_db.calls == []


def test_list_all(client: TestClient, fake_db):
    fake_db.returns([J1, J2])

    response = client.get("/jobs")

    assert response.status_code == 200
    assert response.json() == {"jobs": [J1, J2]}


def test_list_filtered(client: TestClient, fake_db):
    fake_db.returns([J2])

    response = client.get("/jobs", params={"title": "j", "minSalary": 2, "hasEquity": "true"})

    assert response.status_code == 200
    sql, params = fake_db.calls[0]
    assert "WHERE title ILIKE '%' || $1 || '%' AND salary >= $2 AND equity > 0" in sql
    assert params == ["j", 2]


def test_list_has_equity_false_is_unfiltered(client: TestClient, fake_db):
    fake_db.returns([J1, J2])

    response = client.get("/jobs", params={"hasEquity": "false"})

    assert response.status_code == 200
    assert "WHERE" not in fake_db.sql[0]


def test_list_has_equity_invalid(client: TestClient, fake_db):
    response = client.get("/jobs", params={"hasEquity": "maybe"})

    assert response.status_code == 400
    assert fake_db.calls == []


def test_list_filter_matches_nothing(client: TestClient, fake_db):
    fake_db.returns([])

    response = client.get("/jobs", params={"title": "zzz"})

    assert response.status_code == 404
    assert response.json() == {"detail": "No job found"}


def test_get(client: TestClient, fake_db):
    fake_db.returns(J1)

    response = client.get("/jobs/1")

    assert response.status_code == 200
    assert response.json() == {"job": J1}
    assert fake_db.calls[0][1] == [1]


def test_get_bad_id(client: TestClient, fake_db):
    response = client.get("/jobs/abc")

    assert response.status_code == 422
    assert fake_db.calls == []


def test_update(client: TestClient, fake_db, admin_headers):
    fake_db.returns({**J1, "title": "j1-new"})

    response = client.patch("/jobs/1", json={"title": "j1-new"}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["job"]["title"] == "j1-new"


def test_update_company_handle_rejected(client: TestClient, fake_db, admin_headers):
    response = client.patch("/jobs/1", json={"companyHandle": "c2"}, headers=admin_headers)

    assert response.status_code == 422
    assert fake_db.calls == []


def test_update_empty_body(client: TestClient, fake_db, admin_headers):
    response = client.patch("/jobs/1", json={}, headers=admin_headers)

    assert response.status_code == 400


def test_delete(client: TestClient, fake_db, admin_headers):
    fake_db.returns({"id": 1})

    response = client.delete("/jobs/1", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"deleted": 1}


def test_delete_missing(client: TestClient, fake_db, admin_headers):
    fake_db.returns(None)

    response = client.delete("/jobs/0", headers=admin_headers)

    assert response.status_code == 404
