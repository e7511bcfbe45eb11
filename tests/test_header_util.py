"""Tests for the alert header helpers."""

from ride_api.app.core import header_util


def test_creation_alert():
    headers = header_util.create_entity_creation_alert("ride", "7")
    assert headers == {
        "X-rideApp-alert": "rideApp.ride.created",
        "X-rideApp-params": "7",
    }


def test_update_and_deletion_alerts():
    assert header_util.create_entity_update_alert("car", "1")["X-rideApp-alert"] == "rideApp.car.updated"
    assert header_util.create_entity_deletion_alert("car", "1")["X-rideApp-alert"] == "rideApp.car.deleted"


def test_failure_alert():
    headers = header_util.create_failure_alert("place", "idexists", "A new place cannot already have an ID")
    assert headers == {
        "X-rideApp-error": "error.idexists",
        "X-rideApp-params": "place",
    }


def test_prefix_follows_application_name(monkeypatch):
    monkeypatch.setattr(header_util.settings, "application_name", "carpool")
    headers = header_util.create_entity_creation_alert("car", "3")
    assert headers["X-carpool-alert"] == "carpool.car.created"
    assert headers["X-carpool-params"] == "3"
