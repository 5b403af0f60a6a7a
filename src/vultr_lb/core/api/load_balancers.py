"""
Load balancer and forwarding rule clients.

Each method is one stateless request/response exchange through the
transport. Errors from the transport propagate unchanged; nothing is retried.
"""

import logging
from typing import List, Optional, Tuple

from ..resources.envelope import FORWARDING_RULE_ENVELOPE, LOAD_BALANCER_ENVELOPE
from ..resources.load_balancer import ForwardingRule, LoadBalancer, LoadBalancerReq
from ..resources.pagination import Meta
from ..resources.paths import ResourcePaths, load_balancer_paths
from .query import QueryOptions, encode_query
from .transport import Transport

log = logging.getLogger(__name__)


class ForwardingRuleClient:
    """Forwarding rules nested under a load balancer.

    Rules cannot be edited in place; replace one by deleting it and creating
    a new rule.
    """

    def __init__(self, transport: Transport, paths: ResourcePaths = load_balancer_paths):
        self.transport = transport
        self.paths = paths

    async def create(self, lb_id: str, rule: ForwardingRule) -> Optional[ForwardingRule]:
        """Create ``rule`` on load balancer ``lb_id``.

        The returned rule carries the server-assigned ``id``.
        """
        log.debug(f"Creating forwarding rule {rule} on load balancer {lb_id}")
        request = self.transport.build(
            "POST", self.paths.rules(lb_id), rule.to_payload()
        )
        created = FORWARDING_RULE_ENVELOPE.unwrap(await self.transport.execute(request))
        if created is not None:
            log.info(f"Created forwarding rule {created.id} on load balancer {lb_id}")
        return created

    async def get(self, lb_id: str, rule_id: str) -> Optional[ForwardingRule]:
        request = self.transport.build("GET", self.paths.rule(lb_id, rule_id))
        return FORWARDING_RULE_ENVELOPE.unwrap(await self.transport.execute(request))

    async def list(
        self, lb_id: str, options: Optional[QueryOptions] = None
    ) -> Tuple[List[ForwardingRule], Optional[Meta]]:
        """List the rules of ``lb_id`` in server order, with pagination meta."""
        request = self.transport.build(
            "GET", self.paths.rules(lb_id), query=encode_query(options)
        )
        return FORWARDING_RULE_ENVELOPE.unwrap_many(await self.transport.execute(request))

    async def delete(self, lb_id: str, rule_id: str) -> None:
        request = self.transport.build("DELETE", self.paths.rule(lb_id, rule_id))
        await self.transport.execute(request)
        log.info(f"Deleted forwarding rule {rule_id} from load balancer {lb_id}")


class LoadBalancerClient:
    """
    Create, read, update, delete and list load balancers.

    Usage:
        async with VultrClient() as client:
            lb = await client.load_balancers.create(
                LoadBalancerReq(region="ewr", label="web", instances=[])
            )
            rules, meta = await client.load_balancers.forwarding_rules.list(lb.id)
    """

    def __init__(self, transport: Transport, paths: ResourcePaths = load_balancer_paths):
        self.transport = transport
        self.paths = paths
        self.forwarding_rules = ForwardingRuleClient(transport, paths)

    async def create(self, create_req: LoadBalancerReq) -> Optional[LoadBalancer]:
        log.debug(f"Creating load balancer: {create_req.label or 'unnamed'}")
        request = self.transport.build(
            "POST", self.paths.collection(), create_req.to_payload()
        )
        lb = LOAD_BALANCER_ENVELOPE.unwrap(await self.transport.execute(request))
        if lb is not None:
            log.info(f"Created load balancer: {lb.id} - {lb.label or 'unnamed'}")
        return lb

    async def get(self, lb_id: str) -> Optional[LoadBalancer]:
        request = self.transport.build("GET", self.paths.item(lb_id))
        return LOAD_BALANCER_ENVELOPE.unwrap(await self.transport.execute(request))

    async def update(self, lb_id: str, update_req: LoadBalancerReq) -> None:
        """Apply a partial update. Only fields set on ``update_req`` are sent.

        Any response body is discarded; call ``get`` to see the resolved state.
        """
        log.debug(f"Updating load balancer: {lb_id}")
        request = self.transport.build(
            "PATCH", self.paths.item(lb_id), update_req.to_payload()
        )
        await self.transport.execute(request)

    async def delete(self, lb_id: str) -> None:
        request = self.transport.build("DELETE", self.paths.item(lb_id))
        await self.transport.execute(request)
        log.info(f"Deleted load balancer: {lb_id}")

    async def list(
        self, options: Optional[QueryOptions] = None
    ) -> Tuple[List[LoadBalancer], Optional[Meta]]:
        """List load balancers in server order, with pagination meta."""
        request = self.transport.build(
            "GET", self.paths.collection(), query=encode_query(options)
        )
        lbs, meta = LOAD_BALANCER_ENVELOPE.unwrap_many(await self.transport.execute(request))
        log.debug(f"Listed {len(lbs)} load balancers")
        return lbs, meta
