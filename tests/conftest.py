"""Shared fixtures."""

import pytest

from linkedin_groups.api.groups import GroupsClient
from linkedin_groups.core.constants import (
    ENV_ACCESS_TOKEN,
    ENV_API_BASE_URL,
    ENV_CREDENTIALS_FILE,
    ENV_LOG_LEVEL,
    ENV_TIMEOUT,
)


class RecordingTransport:
    """Transport double that records every call and returns a canned result."""

    def __init__(self, result=None):
        self.calls = []
        self.result = {} if result is None else result

    def _record(self, method, path, body=None, headers=None):
        self.calls.append((method, path, body, headers))
        return self.result

    def get(self, path, headers=None):
        return self._record("GET", path, headers=headers)

    def post(self, path, body=None, headers=None):
        return self._record("POST", path, body, headers)

    def put(self, path, body=None, headers=None):
        return self._record("PUT", path, body, headers)

    def delete(self, path, headers=None):
        return self._record("DELETE", path, headers=headers)

    @property
    def last_call(self):
        return self.calls[-1]


@pytest.fixture
def transport():
    return RecordingTransport(result={"_total": 0})


@pytest.fixture
def groups(transport):
    return GroupsClient(transport)


@pytest.fixture
def clean_env(monkeypatch):
    """Unset LINKEDIN_* variables and drop anything a test loads into them."""
    for name in (ENV_ACCESS_TOKEN, ENV_API_BASE_URL, ENV_CREDENTIALS_FILE, ENV_LOG_LEVEL, ENV_TIMEOUT):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
