"""Tests for ACL sources and the store factory."""

import pytest

from resultant_acl.application.factory import create_permission_store
from resultant_acl.application.services.permission_store import PermissionStore
from resultant_acl.core.exceptions import AuthFailureError
from resultant_acl.domain.protocols import ACLSourceProtocol
from resultant_acl.infrastructure.sources import CallableACLSource, StaticACLSource


class TestStaticACLSource:

    @pytest.mark.asyncio
    async def test_returns_copies(self, permissions_response):
        source = StaticACLSource(permissions_response)

        first = await source.fetch()
        first["data"]["exact_paths"].clear()
        second = await source.fetch()

        assert second == permissions_response
        assert source.fetch_count == 2

    @pytest.mark.asyncio
    async def test_raises_configured_error(self):
        source = StaticACLSource(error=AuthFailureError())

        with pytest.raises(AuthFailureError):
            await source.fetch()

    @pytest.mark.asyncio
    async def test_default_body_is_empty_acl(self):
        assert await StaticACLSource().fetch() == {"data": {}}

    def test_implements_protocol(self):
        assert isinstance(StaticACLSource(), ACLSourceProtocol)


class TestCallableACLSource:

    @pytest.mark.asyncio
    async def test_delegates_to_callable(self, permissions_response):
        async def fetch_acl():
            return permissions_response

        source = CallableACLSource(fetch_acl)

        assert await source.fetch() == permissions_response
        assert isinstance(source, ACLSourceProtocol)
        assert "fetch_acl" in repr(source)

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            CallableACLSource("not callable")


class TestFactory:

    def test_wraps_coroutine_function(self, settings, permissions_response):
        async def fetch_acl():
            return permissions_response

        store = create_permission_store(fetch_acl, settings=settings)

        assert isinstance(store, PermissionStore)
        assert isinstance(store.source, CallableACLSource)
        assert store.settings is settings

    def test_keeps_protocol_source(self, static_source, settings):
        store = create_permission_store(static_source, settings=settings)

        assert store.source is static_source

    @pytest.mark.asyncio
    async def test_created_store_loads(self, settings, permissions_response):
        async def fetch_acl():
            return permissions_response

        store = create_permission_store(fetch_acl, settings=settings)
        await store.load()

        assert store.has_permission("foo")
