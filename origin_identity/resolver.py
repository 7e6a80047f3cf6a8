"""
Owner resolver
Finds the Birth Certificate held by a wallet when only the address is known
"""

import logging
from typing import Optional

from .assembler import RecordAssembler
from .gateway import REGISTRY, RemoteReadGateway
from .models import AgentRecord

logger = logging.getLogger(__name__)


class OwnerResolver:
    """
    Linear owner lookup over the registry.

    Probes ``ownerOf`` from the newest id down to 1 and stops at the first
    match. This costs O(N) remote reads and is only suitable for small
    registries; the registry exposes no owner index to do better.
    """

    def __init__(self, gateway: RemoteReadGateway, assembler: RecordAssembler):
        self.gateway = gateway
        self.assembler = assembler

    async def total_agents(self) -> int:
        """Uncached total number of Birth Certificates. Raises RemoteReadError."""
        return int(await self.gateway.call(REGISTRY, "totalAgents"))

    async def resolve_by_owner(self, address: str) -> Optional[AgentRecord]:
        total = await self.total_agents()
        if total == 0:
            return None

        target = address.lower()
        # Sequential on purpose: the scan stops at the first match
        for agent_id in range(total, 0, -1):
            try:
                owner = await self.gateway.call(REGISTRY, "ownerOf", agent_id)
            except Exception as e:
                logger.debug(f"ownerOf({agent_id}) failed, skipping: {e}")
                continue
            if str(owner).lower() == target:
                logger.info(f"Address {address} owns agent {agent_id}")
                return await self.assembler.resolve_by_id(agent_id)

        logger.debug(f"No agent owned by {address} among {total} records")
        return None
