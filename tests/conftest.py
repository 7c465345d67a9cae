import os
from unittest.mock import Mock

import pytest

os.environ.setdefault("LAUNCH_FINDER_LOG_FILE", "")

from src.models import UpcomingLaunches  # noqa: E402


def launch(name=None, net=None, description=None, full_name=None, short_name=None, rocket=True):
    data = {}
    if name is not None:
        data["name"] = name
    if net is not None:
        data["net"] = net
    if description is not None:
        data["mission"] = {"description": description}
    if rocket:
        config = {}
        if full_name is not None:
            config["full_name"] = full_name
        if short_name is not None:
            config["name"] = short_name
        data["rocket"] = {"configuration": config}
    return data


@pytest.fixture
def make_launch():
    return launch


@pytest.fixture
def upcoming():
    def _build(*launches):
        return UpcomingLaunches(results=list(launches))
    return _build


@pytest.fixture
def fake_response():
    def _build(payload=None, status=200, json_error=None):
        resp = Mock()
        resp.status_code = status
        if status >= 400:
            import requests
            resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
        else:
            resp.raise_for_status.return_value = None
        if json_error is not None:
            resp.json.side_effect = json_error
        else:
            resp.json.return_value = payload
        return resp
    return _build
