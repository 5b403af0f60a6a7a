"""Top-level client for the Vultr load balancer API."""

from typing import Optional

from .core.api.load_balancers import LoadBalancerClient
from .core.api.transport import Transport, VultrTransport


class VultrClient:
    """
    Entry point bundling a transport with the resource clients.

    Construct one per application and share it; it holds no state besides the
    transport's HTTP session.

    Usage:
        async with VultrClient(api_key="...") as client:
            lbs, meta = await client.load_balancers.list()
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[Transport] = None,
    ):
        self.transport = transport or VultrTransport(
            api_key=api_key, base_url=base_url, timeout=timeout
        )
        self.load_balancers = LoadBalancerClient(self.transport)

    async def close(self):
        close = getattr(self.transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
