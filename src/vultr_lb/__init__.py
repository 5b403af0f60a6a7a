# Load .env vars from file before everything else
from dotenv import load_dotenv

load_dotenv()

from .logger import setup_logging  # noqa: E402

setup_logging()

from .client import VultrClient  # noqa: E402
from .core.api.load_balancers import ForwardingRuleClient, LoadBalancerClient  # noqa: E402
from .core.api.query import encode_query  # noqa: E402
from .core.api.transport import Request, Transport, VultrTransport  # noqa: E402
from .core.exceptions import (  # noqa: E402
    DecodeError,
    NotFoundError,
    RemoteError,
    RequestBuildError,
    ServerError,
    TransportError,
    UnauthorizedError,
    ValidationError,
    VultrAPIKeyError,
    VultrError,
)
from .core.resources import (  # noqa: E402
    SSL,
    BalancingAlgorithm,
    ForwardingRule,
    GenericInfo,
    HealthCheck,
    Links,
    ListOptions,
    LoadBalancer,
    LoadBalancerReq,
    Meta,
    StickySessions,
)

__all__ = [
    "BalancingAlgorithm",
    "DecodeError",
    "ForwardingRule",
    "ForwardingRuleClient",
    "GenericInfo",
    "HealthCheck",
    "Links",
    "ListOptions",
    "LoadBalancer",
    "LoadBalancerClient",
    "LoadBalancerReq",
    "Meta",
    "NotFoundError",
    "RemoteError",
    "Request",
    "RequestBuildError",
    "SSL",
    "ServerError",
    "StickySessions",
    "Transport",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
    "VultrAPIKeyError",
    "VultrClient",
    "VultrError",
    "VultrTransport",
    "encode_query",
]
