"""Tests for domain models and errors."""

from dataclasses import FrozenInstanceError

import pytest

from nextbus_predictions.domain.errors import (
    DataConsistencyError,
    DirectionNotFoundError,
    DocumentParseError,
    NextBusError,
    ServiceError,
)
from nextbus_predictions.domain.models import (
    Direction,
    ErrorDetails,
    Prediction,
    Route,
    RouteDetail,
    Stop,
    StopRef,
)


def test_stop_creation() -> None:
    """Given stop data, when creating a Stop, then all fields are set correctly."""
    stop = Stop(
        tag="5240",
        title="Judah St & 9th Ave",
        latitude=37.7622,
        longitude=-122.4662,
        stop_id="15240",
    )

    assert stop.tag == "5240"
    assert stop.title == "Judah St & 9th Ave"
    assert stop.latitude == 37.7622
    assert stop.stop_id == "15240"
    assert stop.short_title is None


def test_prediction_is_frozen() -> None:
    """Given a Prediction, when trying to modify it, then raises FrozenInstanceError."""
    prediction = Prediction(minutes=3, seconds=185, epoch_time=1700000180000, direction_tag="OB")

    with pytest.raises(FrozenInstanceError):
        prediction.minutes = 4  # type: ignore[misc]


def test_route_detail_is_a_route() -> None:
    """Given a RouteDetail, when checking its type, then it is also a Route with empty collections."""
    route = RouteDetail(tag="N", title="N-Judah")

    assert isinstance(route, Route)
    assert route.stops == []
    assert route.directions == []
    assert route.paths == []


def test_route_detail_finds_direction_by_tag() -> None:
    """Given directions OB and IB, when finding IB, then returns it; unknown tags give None."""
    inbound = Direction(tag="IB", title="Inbound", stop_refs=[StopRef("5650")])
    route = RouteDetail(
        tag="N", title="N-Judah", directions=[Direction(tag="OB", title="Outbound"), inbound]
    )

    assert route.find_direction("IB") is inbound
    assert route.find_direction("XX") is None


def test_service_error_exposes_details() -> None:
    """Given error details, when raising ServiceError, then status and retry hint are exposed."""
    error = ServiceError(ErrorDetails(reason="Server busy", status_code=200, should_retry=True))

    assert str(error) == "Server busy"
    assert error.status_code == 200
    assert error.should_retry is True
    assert isinstance(error, NextBusError)


def test_error_details_is_frozen() -> None:
    """Given ErrorDetails, when trying to modify it, then pydantic rejects the change."""
    details = ErrorDetails(reason="request failed")

    with pytest.raises(ValueError):
        details.reason = "other"  # type: ignore[misc]


def test_document_parse_error_is_a_service_error() -> None:
    """Given a parse failure, when classifying it, then it is handled like a ServiceError."""
    assert issubclass(DocumentParseError, ServiceError)


def test_direction_not_found_error_carries_tags() -> None:
    """Given a missing direction, when raising, then the message names direction and route."""
    error = DirectionNotFoundError("XX", "N")

    assert error.direction_tag == "XX"
    assert error.route_tag == "N"
    assert str(error) == "Direction 'XX' not found on route 'N'"


def test_data_consistency_error_carries_tags() -> None:
    """Given a dangling stop reference, when raising, then stop, direction and route are kept."""
    error = DataConsistencyError("9999", "OB", "N")

    assert (error.stop_tag, error.direction_tag, error.route_tag) == ("9999", "OB", "N")
    assert "unknown stop '9999'" in str(error)
