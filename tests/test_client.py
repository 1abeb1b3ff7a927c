"""
Tests for the requests-based API client, using a mocked session.
"""
import json
from unittest.mock import Mock

import requests

from community_reports_client import CommunityReportsAPI


def _response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    response.url = "http://testserver"
    return response


def _api(*responses):
    session = Mock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return CommunityReportsAPI(base_url="http://testserver/", session=session), session


def test_submit_report_returns_stored_record():
    stored = {"id": 1, "location": "A", "approved": False}
    api, session = _api(_response(200, {"success": True, "report": stored}))

    report, error = api.submit_report({"location": "A"})

    assert error is None
    assert report == stored
    session.request.assert_called_once_with(
        method="POST", url="http://testserver/api/reports", json={"location": "A"}, timeout=15
    )


def test_list_endpoints_return_lists():
    rows = [{"location": "A", "count": 2}]
    api, session = _api(_response(200, rows))
    assert api.leaderboard() == (rows, None)
    assert session.request.call_args.kwargs["url"] == "http://testserver/api/leaderboard"


def test_error_message_is_taken_from_body():
    api, _ = _api(_response(404, {"success": False, "message": "Report not found"}))
    ok, error = api.approve_report(7)
    assert ok is False
    assert error == {"status_code": 404, "message": "Report not found"}


def test_validation_error_on_create():
    api, session = _api(_response(400, {"success": False, "message": "Name and email are required"}))
    volunteer, error = api.register_volunteer("", "")
    assert volunteer is None
    assert error["status_code"] == 400
    assert session.request.call_args.kwargs["json"] == {"name": "", "email": "", "phone": "", "skills": ""}


def test_delete_report_success():
    api, session = _api(_response(200, {"success": True}))
    assert api.delete_report(5) == (True, None)
    assert session.request.call_args.kwargs["method"] == "DELETE"
    assert session.request.call_args.kwargs["url"] == "http://testserver/api/reports/5"


def test_record_donation_payload():
    donation = {"id": 1, "name": "Ravi", "amount": 5, "photoUrl": "", "dateTime": "2024-01-01T00:00:00.000Z"}
    api, session = _api(_response(200, {"success": True, "donation": donation}))
    assert api.record_donation("Ravi", 5) == (donation, None)
    assert session.request.call_args.kwargs["json"] == {"name": "Ravi", "amount": 5, "photoUrl": ""}


def test_connection_error():
    api, _ = _api(requests.ConnectionError("refused"))
    reports, error = api.list_reports()
    assert reports == []
    assert error == {"status_code": None, "message": "refused"}
