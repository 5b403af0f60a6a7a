"""Concurrent calls share one client without interfering."""

import asyncio
import json

import pytest

from vultr_lb.core.api.load_balancers import LoadBalancerClient
from vultr_lb.core.resources.load_balancer import LoadBalancerReq


class TestConcurrentOperations:
    @pytest.mark.asyncio
    async def test_parallel_creates_keep_bodies_apart(self, slow_transport):
        def echo(request):
            body = json.loads(request.body)
            return {"load_balancer": {"id": f"lb-{body['label']}", **body}}

        slow_transport.responses[("POST", "/load-balancers")] = echo
        client = LoadBalancerClient(slow_transport)

        first, second = await asyncio.gather(
            client.create(LoadBalancerReq(label="one", region="ewr", instances=["a"])),
            client.create(LoadBalancerReq(label="two", region="ams", instances=["b"])),
        )

        assert (first.id, first.region, first.instances) == ("lb-one", "ewr", ["a"])
        assert (second.id, second.region, second.instances) == ("lb-two", "ams", ["b"])
        bodies = sorted(json.loads(r.body)["label"] for r in slow_transport.requests)
        assert bodies == ["one", "two"]

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, slow_transport):
        client = LoadBalancerClient(slow_transport)

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(client.get("lb-123"), timeout=0.001)

    @pytest.mark.asyncio
    async def test_each_call_issued_once(self, slow_transport):
        client = LoadBalancerClient(slow_transport)

        await asyncio.gather(*(client.delete(f"lb-{i}") for i in range(5)))

        assert sorted(r.path for r in slow_transport.requests) == [
            f"/load-balancers/lb-{i}" for i in range(5)
        ]
