from datetime import date

import pytest

from app.errors import NetworkError, ValidationError
from app.models import ActivityType
from app.ui_state import (
    SUCCESS_REDIRECT_DELAY, LogForm, Page, navigate, submit_activity,
)

TODAY = date(2025, 10, 24)


class FakeClient:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def add_activity(self, payload):
        if self.error:
            raise self.error
        self.sent.append(payload)
        return payload


def test_navigation():
    assert navigate("log") == Page.LOG
    assert navigate(Page.DASHBOARD) == Page.DASHBOARD
    assert navigate("settings") == Page.DASHBOARD


def test_new_form_defaults():
    form = LogForm.new(TODAY)
    assert form.type == ActivityType.TRAVEL
    assert form.mode == "Car"
    assert form.unit == "km"
    assert form.distance is None
    assert form.date == TODAY


@pytest.mark.parametrize(
    "activity_type, mode, unit",
    [("Energy", "Electricity", "kWh"), ("Food", "Beef", "serving"), ("Travel", "Car", "km")],
)
def test_changing_type_resets_mode_and_unit(activity_type, mode, unit):
    form = LogForm.new(TODAY).with_type("Food").with_mode("Vegetarian").with_distance(3)

    form = form.with_type(activity_type)

    assert form.mode == mode
    assert form.unit == unit
    assert form.distance is None


def test_mode_must_belong_to_type():
    with pytest.raises(ValueError):
        LogForm.new(TODAY).with_mode("Beef")


def test_date_is_capped_at_today():
    form = LogForm.new(TODAY).with_date(date(2030, 1, 1), today=TODAY)
    assert form.date == TODAY


@pytest.mark.parametrize("distance", [None, 0, -3])
def test_non_positive_amount_is_rejected(distance):
    form = LogForm.new(TODAY).with_distance(distance)
    assert form.validate(TODAY) == "Please enter a valid positive distance/amount."


def test_amount_below_minimum_is_rejected():
    assert "at least 0.1" in LogForm.new(TODAY).with_distance(0.05).validate(TODAY)


def test_payload_carries_rounded_estimate():
    form = LogForm.new(TODAY).with_mode("Flight").with_distance(123.456)

    payload = form.to_payload()

    assert payload.type == ActivityType.TRAVEL
    assert payload.details.mode == "Flight"
    assert payload.details.unit == "km"
    assert payload.carbon_footprint == 43.21
    assert payload.date == TODAY


def test_successful_submit_returns_to_dashboard():
    client = FakeClient()
    form = LogForm.new(TODAY).with_distance(100)

    result = submit_activity(form, client, TODAY)

    assert result.success
    assert result.next_page == Page.DASHBOARD
    assert result.redirect_after == SUCCESS_REDIRECT_DELAY
    assert "14.00 kg" in result.message
    assert client.sent[0].carbon_footprint == 14.0


def test_invalid_form_is_not_submitted():
    client = FakeClient()

    result = submit_activity(LogForm.new(TODAY), client, TODAY)

    assert not result.success
    assert result.next_page == Page.LOG
    assert client.sent == []


def test_network_error_keeps_user_on_form():
    client = FakeClient(error=NetworkError("Could not connect to the server."))

    result = submit_activity(LogForm.new(TODAY).with_distance(5), client, TODAY)

    assert not result.success
    assert result.next_page == Page.LOG
    assert "Could not connect" in result.message


def test_server_validation_error_names_fields():
    client = FakeClient(error=ValidationError({"details.distance": "too small"}))

    result = submit_activity(LogForm.new(TODAY).with_distance(5), client, TODAY)

    assert not result.success
    assert "details.distance" in result.message
