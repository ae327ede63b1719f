"""Unit tests for the Appointment entity, including the future-date rule and immutability."""

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from recordbook.domain import Appointment


def _future(days: int = 1) -> datetime:
    return datetime.now() + timedelta(days=days)


def test_valid_appointment() -> None:
    when = _future()
    a = Appointment("APT1", when, "Checkup")
    assert a.appointment_id == "APT1"
    assert a.appointment_date == when
    assert a.description == "Checkup"


def test_max_lengths_accepted() -> None:
    a = Appointment("1234567890", _future(), "d" * 50)
    assert len(a.appointment_id) == 10
    assert len(a.description) == 50


def test_empty_description_accepted() -> None:
    assert Appointment("APT1", _future(), "").description == ""


@pytest.mark.parametrize(
    ("appointment_id", "message"),
    [
        (None, "Appointment ID cannot be null"),
        ("", "Appointment ID cannot be empty"),
        ("12345678901", "Appointment ID cannot exceed 10 characters"),
    ],
)
def test_invalid_id_rejected(appointment_id, message) -> None:
    with pytest.raises(ValueError, match=message):
        Appointment(appointment_id, _future(), "Checkup")


def test_null_or_past_date_rejected() -> None:
    with pytest.raises(ValueError, match="Appointment date cannot be null"):
        Appointment("APT1", None, "Checkup")
    with pytest.raises(ValueError, match="Appointment date cannot be in the past"):
        Appointment("APT1", datetime.now() - timedelta(seconds=1), "Checkup")
    with pytest.raises(ValueError, match="Appointment date cannot be in the past"):
        Appointment("APT1", datetime(1970, 1, 1), "Checkup")


def test_date_equal_to_now_rejected() -> None:
    # by the time the check runs, now has moved past this value
    with pytest.raises(ValueError, match="in the past"):
        Appointment("APT1", datetime.now(), "Checkup")


def test_aware_dates_compare_in_their_own_zone() -> None:
    tz = timezone(timedelta(hours=-5))
    when = datetime.now(tz) + timedelta(hours=1)
    assert Appointment("APT1", when, "Call").appointment_date == when
    with pytest.raises(ValueError, match="in the past"):
        Appointment("APT2", datetime.now(tz) - timedelta(hours=1), "Call")


def test_invalid_description_rejected() -> None:
    with pytest.raises(ValueError, match="Description cannot be null"):
        Appointment("APT1", _future(), None)
    with pytest.raises(ValueError, match="Description cannot exceed 50 characters"):
        Appointment("APT1", _future(), "d" * 51)


def test_appointment_is_immutable() -> None:
    a = Appointment("APT1", _future(), "Checkup")
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.appointment_id = "APT2"
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.appointment_date = datetime(1970, 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.description = "Other"


def test_stored_date_is_an_immutable_value() -> None:
    # datetime has no mutators, so neither the caller's object nor a read-back value
    # can be changed in place; "changing" one yields a new object
    when = _future()
    a = Appointment("APT1", when, "Checkup")
    assert type(a.appointment_date) is datetime
    with pytest.raises(AttributeError):
        when.year = 1970
    with pytest.raises(AttributeError):
        a.appointment_date.day = 1
    shifted = a.appointment_date - timedelta(days=365)
    assert a.appointment_date == when
    assert a.appointment_date != shifted


def test_date_not_rechecked_after_construction() -> None:
    when = datetime.now() + timedelta(milliseconds=50)
    a = Appointment("APT1", when, "Soon")
    # stays valid after the instant has passed
    assert a.appointment_date == when
