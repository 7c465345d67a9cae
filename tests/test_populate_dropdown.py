import logging
from unittest.mock import Mock

from src.dom import SelectControl
from src.fetch_upcoming import LaunchFetchError, parse_upcoming
from src.models import UpcomingLaunches
from src.populate_dropdown import collect_rocket_names, populate_rocket_dropdown


def test_names_are_deduplicated_and_sorted(make_launch, upcoming):
    fetch = Mock(return_value=upcoming(
        make_launch(full_name="Falcon 9 Block 5"),
        make_launch(full_name="Electron", short_name="Electron"),
        make_launch(full_name="Falcon 9 Block 5"),
        make_launch(short_name="Long March 2D"),
        make_launch(full_name="Falcon 9 Block 5"),
    ))
    select = SelectControl()

    names = populate_rocket_dropdown(select, fetch=fetch)

    fetch.assert_called_once_with(None)
    assert names == ["Electron", "Falcon 9 Block 5", "Long March 2D"]
    assert select.options == [
        ("", "-- All Rockets --"),
        ("Electron", "Electron"),
        ("Falcon 9 Block 5", "Falcon 9 Block 5"),
        ("Long March 2D", "Long March 2D"),
    ]


def test_sort_is_case_sensitive_code_point_order(make_launch, upcoming):
    names = collect_rocket_names(upcoming(
        make_launch(full_name="electron"),
        make_launch(full_name="Vega C"),
        make_launch(full_name="Ariane 6"),
    ))
    assert names == ["Ariane 6", "Vega C", "electron"]


def test_launches_without_rocket_names_are_skipped(make_launch, upcoming):
    names = collect_rocket_names(upcoming(
        make_launch(rocket=False),
        make_launch(),
        make_launch(full_name="", short_name=""),
        make_launch(short_name="PSLV"),
    ))
    assert names == ["PSLV"]


def test_one_off_shape_launch_does_not_empty_the_dropdown():
    select = SelectControl()
    parsed = parse_upcoming({"results": [
        {"name": "Good", "rocket": {"configuration": {"full_name": "Falcon 9 Block 5"}}},
        {"name": "Odd", "net": 1700000000, "rocket": {"configuration": "n/a"}},
    ]})

    assert populate_rocket_dropdown(select, fetch=Mock(return_value=parsed)) == ["Falcon 9 Block 5"]
    assert select.options[1:] == [("Falcon 9 Block 5", "Falcon 9 Block 5")]


def test_missing_results_leaves_default_option_only():
    select = SelectControl()
    assert populate_rocket_dropdown(select, fetch=Mock(return_value=UpcomingLaunches())) == []
    assert select.options == [("", "-- All Rockets --")]


def test_fetch_failure_is_logged_and_not_raised(caplog):
    select = SelectControl()
    fetch = Mock(side_effect=LaunchFetchError("connection refused"))

    with caplog.at_level(logging.ERROR, logger="src.populate_dropdown"):
        assert populate_rocket_dropdown(select, fetch=fetch) == []

    assert select.options == [("", "-- All Rockets --")]
    assert "Error populating rocket dropdown" in caplog.text
    fetch.assert_called_once()
