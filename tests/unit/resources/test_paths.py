"""Tests for load balancer path building."""

from vultr_lb.core.resources.paths import ResourcePaths, load_balancer_paths


class TestResourcePaths:
    def test_collection(self):
        assert load_balancer_paths.collection() == "/load-balancers"

    def test_item(self):
        assert load_balancer_paths.item("lb-123") == "/load-balancers/lb-123"

    def test_rules(self):
        assert (
            load_balancer_paths.rules("lb-123")
            == "/load-balancers/lb-123/forwarding-rules"
        )

    def test_rule(self):
        assert (
            load_balancer_paths.rule("lb-123", "r1")
            == "/load-balancers/lb-123/forwarding-rules/r1"
        )

    def test_identifiers_are_not_validated(self):
        """Odd identifiers are passed through; the API decides."""
        assert load_balancer_paths.item("") == "/load-balancers/"
        assert load_balancer_paths.item("a b") == "/load-balancers/a b"

    def test_custom_root_trailing_slash(self):
        paths = ResourcePaths("/v2/load-balancers/")
        assert paths.item("x") == "/v2/load-balancers/x"
