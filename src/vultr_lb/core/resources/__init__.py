from .envelope import FORWARDING_RULE_ENVELOPE, LOAD_BALANCER_ENVELOPE, Envelope
from .load_balancer import (
    SSL,
    BalancingAlgorithm,
    ForwardingRule,
    GenericInfo,
    HealthCheck,
    LoadBalancer,
    LoadBalancerReq,
    StickySessions,
)
from .pagination import Links, ListOptions, Meta
from .paths import ResourcePaths, load_balancer_paths

__all__ = [
    "BalancingAlgorithm",
    "Envelope",
    "FORWARDING_RULE_ENVELOPE",
    "ForwardingRule",
    "GenericInfo",
    "HealthCheck",
    "LOAD_BALANCER_ENVELOPE",
    "Links",
    "ListOptions",
    "LoadBalancer",
    "LoadBalancerReq",
    "Meta",
    "ResourcePaths",
    "SSL",
    "StickySessions",
    "load_balancer_paths",
]
