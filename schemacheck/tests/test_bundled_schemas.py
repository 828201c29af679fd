from __future__ import annotations

import pytest

from schemacheck.errors import ValidationError
from schemacheck.registry import resolve_schema

SERVICE_CONFIG = {
    "service": "edge-proxy",
    "listen": {"host": "10.0.0.1", "port": 8443},
    "upstreams": [
        "https://backend.example.com/pool?zone=a",
        {"address": "2001:db8::10", "weight": 0.5},
    ],
    "deployed_at": "2024-05-01T12:00:00Z",
    "maintenance": {"day": "sun", "window": "03:00:00"},
    "debug": False,
}


def test_service_config_conforms() -> None:
    resolve_schema("service_config").validate(SERVICE_CONFIG)


@pytest.mark.parametrize(
    "patch, path",
    [
        ({"listen": {"host": "10.0.0.1"}}, "listen.port"),
        ({"listen": {"host": "10.0.0.999", "port": 80}}, "listen.host"),
        ({"service": "Edge Proxy"}, "service"),
        ({"upstreams": []}, "upstreams"),
        ({"upstreams": [{"address": "2001:db8::10", "weight": 0}]}, "upstreams[0]"),
        ({"maintenance": {"day": "mon"}}, "maintenance.day"),
        ({"deployed_at": "2024-05-01"}, "deployed_at"),
    ],
)
def test_service_config_violations(patch, path) -> None:
    document = {**SERVICE_CONFIG, **patch}
    with pytest.raises(ValidationError) as excinfo:
        resolve_schema("service_config").validate(document)
    assert excinfo.value.path == path


def test_user_profile_sub_schema() -> None:
    schema = resolve_schema("user_profile")
    schema.validate(["admin", "viewer"], "roles")
    with pytest.raises(ValidationError) as excinfo:
        schema.validate(["admin", "root"], "roles")
    assert excinfo.value.path == "[1]"
