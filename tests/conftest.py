"""
Test configuration and fixtures for vultr_lb tests.

Provides shared fixtures for:
- A recording fake transport standing in for the Vultr API
- Sample API payloads
- Environment variable management
"""

import asyncio
import json
from typing import Any, Dict, List, Optional

import pytest

from vultr_lb.core.api.transport import Request, build_request


class RecordingTransport:
    """Fake transport that records every request and replays canned responses.

    ``responses`` maps ``(method, path)`` to either a response dict, None,
    or an exception instance to raise.
    """

    def __init__(
        self,
        responses: Optional[Dict[tuple, Any]] = None,
        latency: float = 0.0,
    ):
        self.responses = responses or {}
        self.latency = latency
        self.requests: List[Request] = []

    def build(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        query: str = "",
    ) -> Request:
        return build_request(method, path, body, query)

    async def execute(self, request: Request) -> Optional[Dict[str, Any]]:
        self.requests.append(request)
        if self.latency:
            await asyncio.sleep(self.latency)

        response = self.responses.get((request.method, request.path))
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(request)
        return response

    @property
    def last(self) -> Request:
        return self.requests[-1]

    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.last.body)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def slow_transport() -> RecordingTransport:
    """Transport that yields to the event loop before every response."""
    return RecordingTransport(latency=0.05)


@pytest.fixture
def sample_lb_data() -> Dict[str, Any]:
    """Load balancer as returned by GET /load-balancers/{id}."""
    return {
        "id": "lb-123",
        "date_created": "2024-01-01T00:00:00+00:00",
        "region": "ewr",
        "label": "web",
        "status": "active",
        "ipv4": "192.0.2.10",
        "ipv6": "2001:db8::10",
        "instances": ["inst-a", "inst-b"],
        "health_check": {
            "protocol": "http",
            "port": 80,
            "path": "/health",
            "check_interval": 15,
            "response_timeout": 5,
            "unhealthy_threshold": 5,
            "healthy_threshold": 5,
        },
        "generic_info": {
            "balancing_algorithm": "roundrobin",
            "ssl_redirect": False,
            "sticky_sessions": {"cookie_name": "session"},
            "proxy_protocol": "false",
        },
        "has_ssl": False,
        "forwarding_rules": [
            {
                "id": "rule-1",
                "frontend_protocol": "http",
                "frontend_port": 80,
                "backend_protocol": "http",
                "backend_port": 8080,
            }
        ],
    }


@pytest.fixture
def sample_rule_data() -> Dict[str, Any]:
    return {
        "id": "rule-9",
        "frontend_protocol": "https",
        "frontend_port": 443,
        "backend_protocol": "http",
        "backend_port": 8080,
    }


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> Dict[str, str]:
    """Set the environment variables the client reads."""
    env_vars = {
        "VULTR_API_KEY": "test_api_key_123",
        "LOG_LEVEL": "ERROR",
    }

    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)

    return env_vars


@pytest.fixture
def no_credentials(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Remove every source of an API key."""
    monkeypatch.delenv("VULTR_API_KEY", raising=False)
    monkeypatch.setenv("VULTR_CREDENTIALS_FILE", str(tmp_path / "missing.toml"))
