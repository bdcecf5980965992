from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from curllite.models import RequestDescription


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture()
def post_request() -> "RequestDescription":
    from curllite.models import RequestDescription

    return RequestDescription(
        target_url="https://api.test/v1/items?x=1",
        method="POST",
        headers={"Content-Type": "application/json"},
        body='{"name": "widget", "count": 2}',
    )
