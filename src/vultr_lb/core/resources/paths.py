"""Canonical REST paths for load balancers and their forwarding rules.

Identifiers are opaque and inserted as given; a malformed one only shows up
as an error from the API.
"""

from ..api.constants import FORWARDING_RULES_SEGMENT, LOAD_BALANCERS_PATH


class ResourcePaths:
    """Path builder for a collection root and its nested rule collection."""

    def __init__(self, root: str = LOAD_BALANCERS_PATH):
        self.root = root.rstrip("/")

    def collection(self) -> str:
        return self.root

    def item(self, resource_id: str) -> str:
        return f"{self.root}/{resource_id}"

    def rules(self, resource_id: str) -> str:
        return f"{self.item(resource_id)}/{FORWARDING_RULES_SEGMENT}"

    def rule(self, resource_id: str, rule_id: str) -> str:
        return f"{self.rules(resource_id)}/{rule_id}"


load_balancer_paths = ResourcePaths()
