"""
API tests for reports: submission, listing, approval and deletion.
"""
import json


def _create(client, **payload):
    response = client.post("/api/reports", json=payload)
    assert response.status_code == 200
    return response.json()["report"]


def test_list_reports_without_file(client):
    """Listing before anything was stored returns an empty list"""
    response = client.get("/api/reports")
    assert response.status_code == 200
    assert response.json() == []


def test_create_report_forces_unapproved(client):
    """A client cannot submit an already approved report"""
    response = client.post(
        "/api/reports",
        json={"location": "Main St", "description": "Pothole", "approved": True},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    report = data["report"]
    assert report["approved"] is False
    assert isinstance(report["id"], int)
    assert report["location"] == "Main St"


def test_create_report_round_trip_keeps_extra_fields(client, data_dir):
    payload = {"location": "Harbour", "severity": 3, "tags": ["water", "urgent"]}
    report = _create(client, **payload)

    stored = client.get("/api/reports").json()
    assert stored == [{**payload, "id": report["id"], "approved": False}]
    on_disk = json.loads((data_dir / "reports.json").read_text(encoding="utf-8"))
    assert on_disk == stored


def test_undeclared_fields_are_not_written_as_null(client):
    report = _create(client, location="Park")
    assert "description" not in report
    assert "category" not in report


def test_client_supplied_id_is_replaced(client):
    report = _create(client, id=1, location="Park")
    assert report["id"] != 1


def test_ids_are_unique_and_increasing(client):
    ids = [_create(client, location="L")["id"] for _ in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 5


def test_approve_report(client):
    report = _create(client, location="Bridge")
    response = client.post(f"/api/reports/{report['id']}/approve")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/api/reports").json()[0]["approved"] is True


def test_approve_unknown_report(client):
    _create(client, location="Bridge")
    response = client.post("/api/reports/123/approve")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Report not found"}


def test_approve_without_file(client):
    response = client.post("/api/reports/123/approve")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "File not found"}


def test_delete_report(client):
    first = _create(client, location="A")
    second = _create(client, location="B")
    response = client.delete(f"/api/reports/{first['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert [r["id"] for r in client.get("/api/reports").json()] == [second["id"]]


def test_delete_unknown_report_is_idempotent(client):
    """Deleting an id that is not stored succeeds and changes nothing"""
    report = _create(client, location="A")
    before = client.get("/api/reports").json()
    response = client.delete("/api/reports/42")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/api/reports").json() == before == [report]


def test_delete_without_file(client):
    response = client.delete("/api/reports/42")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "File not found"}


def test_non_integer_id_is_rejected(client):
    response = client.post("/api/reports/abc/approve")
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_non_object_body_is_rejected(client):
    response = client.post("/api/reports", json=["not", "an", "object"])
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_corrupted_file_is_server_error(client, data_dir):
    (data_dir / "reports.json").write_text("{broken", encoding="utf-8")
    response = client.get("/api/reports")
    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert "reports.json" in data["message"]


def test_non_string_values_are_stored_unchanged(client):
    """Declared fields accept any JSON value, not only strings"""
    payload = {"location": 12, "category": ["a", "b"], "description": {"en": "flood"}}
    report = _create(client, **payload)
    assert {key: report[key] for key in payload} == payload
    stored = client.get("/api/reports").json()[0]
    assert {key: stored[key] for key in payload} == payload


def test_malformed_records_in_file_are_server_error(client, data_dir):
    (data_dir / "reports.json").write_text("[1, 2]", encoding="utf-8")
    for response in (client.get("/api/reports"), client.post("/api/reports/1/approve"), client.delete("/api/reports/1")):
        assert response.status_code == 500
        assert response.json()["success"] is False
