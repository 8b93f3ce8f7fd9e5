from __future__ import annotations

from datetime import timedelta

from models import Base
from validation.policies import years_before

URL = "/api/v1/employees"


def payload(today, **overrides):
    body = {
        "name": "Jane Alexandra Doe",
        "dateOfBirth": years_before(today, 36).isoformat(),
        "email": "jane.doe@acme.io",
        "phone": "+1 (555) 123-4567",
        "hourlySalary": 220.0,
    }
    body.update(overrides)
    return body


def violation_kinds(response):
    return sorted(v["kind"] for v in response.json()["violations"])


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_then_get_round_trip(client, today):
    created = client.post(URL, json=payload(today))
    assert created.status_code == 201
    body = created.json()
    assert isinstance(body["id"], int)
    assert body["dateOfBirth"] == years_before(today, 36).isoformat()
    assert body["hourlySalary"] == 220.0

    fetched = client.get(f"{URL}/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_create_accepts_snake_case_fields(client, today):
    response = client.post(
        URL,
        json={
            "name": "Jane Alexandra Doe",
            "date_of_birth": years_before(today, 25).isoformat(),
            "hourly_salary": 60,
        },
    )
    assert response.status_code == 201
    assert response.json()["hourlySalary"] == 60.0


def test_create_reports_all_violations(client, today):
    response = client.post(
        URL,
        json=payload(
            today,
            name="Jane5",
            hourlySalary=1000,
            dateOfBirth=years_before(today, 70).isoformat(),
        ),
    )
    assert response.status_code == 422
    assert response.json()["detail"] == "Validation failed"
    assert violation_kinds(response) == ["InvalidBirthDate", "InvalidLength", "OutOfRange"]
    assert client.get(URL).json() == []


def test_create_senior_boundaries(client, today):
    threshold = years_before(today, 30).isoformat()

    accepted = client.post(URL, json=payload(today, dateOfBirth=threshold, hourlySalary=200))
    assert accepted.status_code == 201

    rejected = client.post(URL, json=payload(today, dateOfBirth=threshold, hourlySalary=199))
    assert rejected.status_code == 422
    assert rejected.json()["violations"] == [
        {
            "field": "record",
            "kind": "SalaryBelowMinimum",
            "message": "Minimum hourly salary is not valid.",
        }
    ]


def test_create_junior_boundary(client, today):
    dob = (years_before(today, 30) + timedelta(days=1)).isoformat()
    response = client.post(URL, json=payload(today, dateOfBirth=dob, hourlySalary=50))
    assert response.status_code == 201


def test_create_age_limit_boundaries(client, today):
    limit = years_before(today, 65)
    assert client.post(URL, json=payload(today, dateOfBirth=limit.isoformat())).status_code == 201

    too_old = (limit - timedelta(days=1)).isoformat()
    response = client.post(URL, json=payload(today, dateOfBirth=too_old))
    assert response.status_code == 422
    assert violation_kinds(response) == ["InvalidBirthDate"]


def test_create_missing_fields(client):
    response = client.post(URL, json={})
    assert response.status_code == 422
    assert [(v["field"], v["kind"]) for v in response.json()["violations"]] == [
        ("name", "MissingField"),
        ("dateOfBirth", "MissingField"),
        ("hourlySalary", "MissingField"),
    ]


def test_get_missing_returns_404(client):
    response = client.get(f"{URL}/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Employee 999 not found."


def test_list_returns_all(client, today):
    client.post(URL, json=payload(today))
    client.post(URL, json=payload(today, name="John Michael Roe"))
    names = sorted(e["name"] for e in client.get(URL).json())
    assert names == ["Jane Alexandra Doe", "John Michael Roe"]


def test_update_identifier_mismatch(client, today):
    response = client.put(f"{URL}/5", json=payload(today, id=7, name="bad"))
    assert response.status_code == 400
    assert violation_kinds(response) == ["IdentifierMismatch"]


def test_update_missing_returns_404(client, today):
    response = client.put(f"{URL}/999", json=payload(today, id=999))
    assert response.status_code == 404
    assert violation_kinds(response) == ["NotFound"]


def test_update_overwrites_record(client, today):
    employee_id = client.post(URL, json=payload(today)).json()["id"]

    changes = {
        "id": employee_id,
        "name": "Jane Alexandra Smith",
        "dateOfBirth": years_before(today, 28).isoformat(),
        "hourlySalary": 80.5,
    }
    response = client.put(f"{URL}/{employee_id}", json=changes)
    assert response.status_code == 200
    assert response.json() == {**changes, "email": None, "phone": None}
    assert client.get(f"{URL}/{employee_id}").json() == response.json()


def test_update_is_validated(client, today):
    created = client.post(URL, json=payload(today)).json()
    response = client.put(
        f"{URL}/{created['id']}",
        json=payload(today, id=created["id"], email="not-an-email", hourlySalary=150),
    )
    assert response.status_code == 422
    assert violation_kinds(response) == ["InvalidFormat", "SalaryBelowMinimum"]
    assert client.get(f"{URL}/{created['id']}").json() == created


def test_delete(client, today):
    employee_id = client.post(URL, json=payload(today)).json()["id"]
    response = client.delete(f"{URL}/{employee_id}")
    assert response.status_code == 204
    assert client.get(f"{URL}/{employee_id}").status_code == 404


def test_delete_missing_leaves_storage_unchanged(client, today):
    client.post(URL, json=payload(today))
    response = client.delete(f"{URL}/999")
    assert response.status_code == 404
    assert violation_kinds(response) == ["NotFound"]
    assert len(client.get(URL).json()) == 1


def test_id_beyond_column_range_returns_404(client, today):
    huge = 2**70
    assert client.get(f"{URL}/{huge}").status_code == 404

    updated = client.put(f"{URL}/{huge}", json=payload(today, id=huge))
    assert updated.status_code == 404
    assert violation_kinds(updated) == ["NotFound"]

    deleted = client.delete(f"{URL}/{huge}")
    assert deleted.status_code == 404
    assert violation_kinds(deleted) == ["NotFound"]


def test_storage_failure_returns_500(client, engine, today):
    Base.metadata.tables["employee"].drop(engine)

    for response in (
        client.get(URL),
        client.get(f"{URL}/1"),
        client.post(URL, json=payload(today)),
    ):
        assert response.status_code == 500
        assert response.json()["detail"].startswith("Internal server error")


def test_delete_documents_only_its_own_failures(client):
    operation = client.get("/openapi.json").json()["paths"][f"{URL}/{{employee_id}}"]["delete"]
    assert {"204", "404", "500"} <= set(operation["responses"])
    assert "400" not in operation["responses"]
