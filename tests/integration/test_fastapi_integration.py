"""
Integration tests for the FastAPI helpers.

Exercises startup loading, route gating, on-demand retry after a failed
startup load, and the error envelope.
"""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from resultant_acl.application.services.permission_store import PermissionStore
from resultant_acl.core.exceptions import AuthFailureError, FetchFailureError, PermissionDeniedError
from resultant_acl.infrastructure.sources import StaticACLSource
from resultant_acl.interfaces.fastapi import (
    RequirePathPermission,
    get_permission_store,
    permission_store_lifespan,
    register_error_handlers,
)


def build_app(store: PermissionStore, raise_on_error: bool = True) -> FastAPI:
    app = FastAPI(lifespan=permission_store_lifespan(store, raise_on_error=raise_on_error))
    register_error_handlers(app)

    @app.get("/foo", dependencies=[Depends(RequirePathPermission("foo"))])
    async def read_foo():
        return {"path": "foo"}

    @app.get("/biz", dependencies=[Depends(RequirePathPermission("biz"))])
    async def read_biz():
        return {"path": "biz"}

    @app.get("/state")
    async def read_state(store: PermissionStore = Depends(get_permission_store)):
        return {"state": store.state.value, "loaded": store.is_loaded}

    @app.get("/denied")
    async def raise_denied():
        raise PermissionDeniedError("sys/raw")

    return app


class TestPermissionStoreLifespan:

    def test_loads_at_startup(self, store, static_source):
        with TestClient(build_app(store)) as client:
            response = client.get("/state")

        assert response.json() == {"state": "loaded", "loaded": True}
        assert static_source.fetch_count == 1

    def test_startup_fails_when_acl_unavailable(self, settings):
        store = PermissionStore(StaticACLSource(error=AuthFailureError()), settings=settings)

        with pytest.raises(AuthFailureError):
            with TestClient(build_app(store)):
                pass

    def test_tolerant_startup_keeps_store_empty(self, settings):
        store = PermissionStore(StaticACLSource(error=FetchFailureError()), settings=settings)

        with TestClient(build_app(store, raise_on_error=False)) as client:
            response = client.get("/state")

        assert response.json() == {"state": "empty", "loaded": False}


class TestRequirePathPermission:

    def test_permitted_path(self, store):
        with TestClient(build_app(store)) as client:
            response = client.get("/foo")

        assert response.status_code == 200
        assert response.json() == {"path": "foo"}

    def test_denied_path(self, store):
        with TestClient(build_app(store)) as client:
            response = client.get("/biz")

        assert response.status_code == 403
        assert response.json()["detail"]["code"] == "PERMISSION_DENIED"
        assert response.json()["detail"]["details"] == {"path": "biz"}

    def test_retries_load_on_request(self, settings, permissions_response):
        source = StaticACLSource(permissions_response, error=FetchFailureError("unreachable"))
        store = PermissionStore(source, settings=settings)

        with TestClient(build_app(store, raise_on_error=False)) as client:
            unavailable = client.get("/foo")
            source.error = None
            recovered = client.get("/foo")

        assert unavailable.status_code == 503
        assert unavailable.json()["detail"]["code"] == "ACL_FETCH_FAILED"
        assert recovered.status_code == 200
        assert source.fetch_count == 3

    def test_without_on_demand_load_denies(self, settings, permissions_response):
        store = PermissionStore(StaticACLSource(permissions_response), settings=settings)
        app = FastAPI()
        app.state.permission_store = store

        @app.get("/foo", dependencies=[Depends(RequirePathPermission("foo", load_if_needed=False))])
        async def read_foo():
            return {"path": "foo"}

        with TestClient(app) as client:
            response = client.get("/foo")

        assert response.status_code == 403
        assert store.source.fetch_count == 0


class TestErrorHandlers:

    def test_permissions_error_rendered_as_envelope(self, store):
        with TestClient(build_app(store)) as client:
            response = client.get("/denied")

        assert response.status_code == 403
        assert response.json() == {
            "error": {
                "code": "PERMISSION_DENIED",
                "message": "Permission denied: sys/raw",
                "details": {"path": "sys/raw"},
                "type": "PermissionDeniedError",
            }
        }

    def test_missing_store_is_a_configuration_error(self):
        app = FastAPI()

        @app.get("/foo", dependencies=[Depends(RequirePathPermission("foo"))])
        async def read_foo():
            return {}

        with TestClient(app, raise_server_exceptions=True) as client:
            with pytest.raises(RuntimeError):
                client.get("/foo")
