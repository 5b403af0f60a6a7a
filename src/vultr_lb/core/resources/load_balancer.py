"""
Load balancer domain models.

Read models (``LoadBalancer``, ``GenericInfo``) mirror what the API returns.
Write models (``LoadBalancerReq``, ``HealthCheck``, ``StickySessions``, ``SSL``,
``ForwardingRule``) are sent to the API; every optional field defaults to None
and is dropped on serialization, so an unset field never clears remote state.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    field_serializer,
    field_validator,
)


class BalancingAlgorithm(str, Enum):
    ROUNDROBIN = "roundrobin"
    LEASTCONN = "leastconn"


class WireModel(BaseModel):
    """Base for models exchanged with the API."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        use_enum_values=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the wire representation, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class HealthCheck(WireModel):
    protocol: Optional[str] = None
    port: Optional[int] = None
    path: Optional[str] = None
    check_interval: Optional[int] = None
    response_timeout: Optional[int] = None
    unhealthy_threshold: Optional[int] = None
    healthy_threshold: Optional[int] = None


class StickySessions(WireModel):
    """Cookie based session affinity.

    The API represents the enablement flag as a string ("on"/"off").
    """

    enabled: Optional[str] = Field(default=None, alias="sticky_sessions")
    cookie_name: Optional[str] = None


class SSL(WireModel):
    """Certificate bundle. Write-only; never returned by reads."""

    private_key: Optional[SecretStr] = Field(default=None, alias="ssl_private_key")
    certificate: Optional[str] = Field(default=None, alias="ssl_certificate", repr=False)
    chain: Optional[str] = Field(default=None, repr=False)

    @field_serializer("private_key", when_used="json")
    def reveal_private_key(self, value: Optional[SecretStr]) -> Optional[str]:
        """Send the key itself on the wire; everywhere else it stays masked."""
        return value.get_secret_value() if value is not None else None


class GenericInfo(WireModel):
    """Effective configuration resolved by the server. Never sent."""

    balancing_algorithm: Optional[str] = None
    ssl_redirect: Optional[bool] = None
    sticky_sessions: Optional[StickySessions] = None
    proxy_protocol: Optional[str] = None


class ForwardingRule(WireModel):
    """Frontend to backend port/protocol mapping.

    ``id`` is None on the rule sent to create it and filled in by the server.
    """

    id: Optional[str] = None
    frontend_protocol: Optional[str] = None
    frontend_port: Optional[int] = None
    backend_protocol: Optional[str] = None
    backend_port: Optional[int] = None

    def __str__(self) -> str:
        return (
            f"{self.frontend_protocol}:{self.frontend_port} -> "
            f"{self.backend_protocol}:{self.backend_port}"
        )


class LoadBalancer(WireModel):
    """A load balancer as reported by the API."""

    id: Optional[str] = None
    date_created: Optional[str] = None
    region: Optional[str] = None
    label: Optional[str] = None
    status: Optional[str] = None
    ipv4: Optional[str] = None
    ipv6: Optional[str] = None
    instances: List[str] = Field(default_factory=list)
    health_check: Optional[HealthCheck] = None
    generic_info: Optional[GenericInfo] = None
    ssl_info: bool = Field(default=False, alias="has_ssl")
    forwarding_rules: List[ForwardingRule] = Field(default_factory=list)

    @field_validator("instances", "forwarding_rules", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("ssl_info", mode="before")
    @classmethod
    def _null_as_false(cls, value):
        return False if value is None else value

    def __str__(self) -> str:
        return f"{self.__class__.__name__}:{self.id}"


class LoadBalancerReq(WireModel):
    """Create/update payload for a load balancer.

    ``instances`` must be given explicitly, even on updates, because the API
    replaces the attached set with whatever is sent; pass the current list
    to keep it. Everything else is sent only when set, which makes the same
    model usable for partial updates.
    """

    region: Optional[str] = None
    label: Optional[str] = None
    instances: List[str]
    health_check: Optional[HealthCheck] = None
    sticky_sessions: Optional[StickySessions] = Field(default=None, alias="sticky_session")
    forwarding_rules: Optional[List[ForwardingRule]] = None
    ssl: Optional[SSL] = None
    ssl_redirect: Optional[bool] = None
    proxy_protocol: Optional[bool] = None
    balancing_algorithm: Optional[BalancingAlgorithm | str] = None
