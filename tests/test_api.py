from __future__ import annotations

import pytest

from src.attendance_toolkit.attendance_toolkit.main import create_app


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()


def test_time_now(client):
    resp = client.get("/api/time/now")
    assert resp.status_code == 200
    assert resp.get_json()["utc"].endswith("Z")


def test_time_convert(client):
    resp = client.get("/api/time/convert", query_string={"value": "2024-01-01T15:05:00", "locale": "en-US"})
    data = resp.get_json()

    assert resp.status_code == 200
    assert data["utc"] == "2024-01-01T15:05:00Z"
    assert data["date"] == "Jan 1, 2024"
    assert data["weekday"] == "Monday"
    assert data["is_today"] is False


def test_time_convert_arabic_preference(client):
    en = client.get("/api/time/convert", query_string={"value": "2024-01-01T15:05:00Z"}).get_json()
    ar = client.get("/api/time/convert", query_string={"value": "2024-01-01T15:05:00Z", "lang": "ar"}).get_json()
    assert ar["date"] != en["date"]


def test_time_convert_requires_value(client):
    resp = client.get("/api/time/convert")
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_time_duration(client):
    resp = client.get("/api/time/duration", query_string={"start": "2024-01-01T00:00:00Z", "end": "2024-01-01T01:30:00Z"})
    assert resp.get_json() == {"seconds": 5400, "minutes": 90, "label": "1h 30m"}


def test_geofence_distance(client):
    resp = client.get("/api/geofence/distance", query_string={"from": "0,0", "to": "0,1"})
    assert resp.get_json()["meters"] == pytest.approx(111194.93, abs=0.01)


def test_geofence_distance_rejects_bad_coordinates(client):
    resp = client.get("/api/geofence/distance", query_string={"from": "0,0", "to": "nowhere"})
    assert resp.status_code == 400


def test_geofence_check(client):
    body = {"location": "30.00000,31.00000", "latitude": 30.0, "longitude": 31.0, "radius_meters": 0}
    resp = client.post("/api/geofence/check", json=body)
    assert resp.get_json() == {"within_radius": True}


def test_geofence_check_requires_radius(client):
    body = {"location": "30.0,31.0", "latitude": 30.0, "longitude": 31.0}
    resp = client.post("/api/geofence/check", json=body)
    assert resp.status_code == 400


def test_geofence_extract(client):
    resp = client.get("/api/geofence/extract", query_string={"url": "https://maps.google.com/maps?ll=30.0444,31.2357"})
    assert resp.get_json() == {"lat": 30.0444, "lng": 31.2357}

    resp = client.get("/api/geofence/extract", query_string={"url": "not a url"})
    assert resp.status_code == 404


def test_work_days(client):
    resp = client.get("/api/work-days", query_string={"values": "7,3"})
    assert resp.get_json() == {"values": [7, 3], "names": ["friday", "monday"], "label": "Monday, Friday"}

    resp = client.get("/api/work-days", query_string={"names": "sunday,saturday"})
    assert resp.get_json()["label"] == "Saturday, Sunday"

    assert client.get("/api/work-days", query_string={"values": "a,b"}).status_code == 400


def test_attendance_log_rows(client):
    logs = [
        {"id": 1, "clockinTime": "2024-01-01T08:00:00", "clockoutTime": "2024-01-01T16:00:00", "office": True},
        {"id": 2, "clockinTime": "2024-01-02T08:20:00", "isLate": True, "officeRemote": False},
    ]
    resp = client.post("/api/attendance-logs/rows", json={"logs": {"items": logs}, "filters": {"status": "late"}})
    data = resp.get_json()

    assert resp.status_code == 200
    assert data["total"] == 1
    assert data["rows"][0]["log_id"] == 2
    assert data["rows"][0]["location"] == "home"


def test_attendance_log_rows_rejects_bad_date(client):
    resp = client.post("/api/attendance-logs/rows", json={"logs": [], "filters": {"date_from": "01/02/2024"}})
    assert resp.status_code == 400


@pytest.mark.parametrize("filters", ["late", ["status", "late"], 3])
def test_attendance_log_rows_rejects_non_object_filters(client, filters):
    resp = client.post("/api/attendance-logs/rows", json={"logs": [], "filters": filters})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_attendance_log_rows_ignores_malformed_shift_rule(client):
    logs = [{"id": 1, "clockinTime": "2024-01-01T08:00:00", "office": False, "shiftRule": "HQ"}]
    resp = client.post("/api/attendance-logs/rows", json={"logs": logs})

    assert resp.status_code == 200
    assert resp.get_json()["rows"][0]["location"] == "home"
