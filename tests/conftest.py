"""Pytest configuration and fixtures for resultant-acl tests."""

import asyncio
import copy

import pytest

from resultant_acl.application.services.permission_store import PermissionStore
from resultant_acl.config.settings import PermissionSettings
from resultant_acl.infrastructure.sources import StaticACLSource


PERMISSIONS_RESPONSE = {
    "data": {
        "exact_paths": {
            "foo": {"capabilities": ["read"]},
            "bar": {"capabilities": ["create"]},
        },
        "glob_paths": {
            "baz": {"capabilities": ["read"]},
        },
    },
}


class GatedACLSource:
    """ACL source whose fetch blocks until released."""

    def __init__(self, body=None, error=None):
        self.body = body if body is not None else copy.deepcopy(PERMISSIONS_RESPONSE)
        self.error = error
        self.fetch_count = 0
        self.release = asyncio.Event()

    async def fetch(self):
        self.fetch_count += 1
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.body)


@pytest.fixture
def permissions_response():
    """Resultant ACL response body with exact and glob paths."""
    return copy.deepcopy(PERMISSIONS_RESPONSE)


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return PermissionSettings(_env_file=None)


@pytest.fixture
def static_source(permissions_response):
    """Static source serving the sample response."""
    return StaticACLSource(permissions_response)


@pytest.fixture
def store(static_source, settings):
    """Empty permission store backed by the static source."""
    return PermissionStore(static_source, settings=settings)


@pytest.fixture
def gated_source_factory():
    """Factory for sources whose fetch waits on ``source.release``."""
    return GatedACLSource
