"""
Fixtures and test configuration for the researchexport test suite.
"""

import tempfile
import time
from pathlib import Path
from typing import Any, Dict
from unittest.mock import Mock

import pytest
import requests

from researchexport.data.fetch.fetcher_base import BaseFetcher, RequestTarget
from researchexport.settings import Settings


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def test_settings(temp_dir):
    """Create test settings with temporary directories."""
    settings = Settings(
        root_dir=temp_dir,
        output_dir=temp_dir / "exports",
        base_url="https://portal.example.org/",
        log_level="DEBUG",
        request_timeout=30,
    )
    settings.create_directories()
    return settings


@pytest.fixture
def sample_targets():
    """Two targets on the example portal."""
    return [
        RequestTarget(id="a", url="portal/search-result?keyword=a&format=json"),
        RequestTarget(id="b", url="portal/search-result?keyword=b&format=json"),
    ]


def make_response(body: Any = None, status_code: int = 200, invalid_json: bool = False):
    """Build a mock requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error"
        )
    else:
        response.raise_for_status.return_value = None
    if invalid_json:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1")
    else:
        response.json.return_value = body
    return response


def make_raw_response(content: bytes, status_code: int = 200):
    """Build a real requests.Response around a raw body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response.encoding = "utf-8"
    return response


@pytest.fixture
def raw_response_factory():
    """Factory for responses whose body is parsed by requests itself."""
    return make_raw_response


@pytest.fixture
def response_factory():
    """Factory for mock HTTP responses."""
    return make_response


class StubFetcher(BaseFetcher):
    """Fetcher serving canned result sets, optionally after a delay."""

    def __init__(self, results: Dict[str, Any], delays: Dict[str, float] = None):
        super().__init__(base_url="https://portal.example.org/")
        self.results = results
        self.delays = delays or {}
        self.calls = []

    @property
    def fetcher_type(self):
        return "stub"

    def can_handle(self, target):
        return target.id in self.results

    def fetch(self, target):
        self.calls.append(target.id)
        time.sleep(self.delays.get(target.id, 0))
        result = self.results[target.id]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def stub_fetcher_class():
    return StubFetcher
