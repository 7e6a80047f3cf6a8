"""
Record assembler
Builds a complete AgentRecord from several concurrent registry reads
"""

import asyncio
import logging
from typing import Awaitable, Optional, Tuple, TypeVar

from .cache import TTLCache
from .gateway import REGISTRY, RemoteReadGateway
from .models import AgentRecord, AuxiliaryFields, CoreFields, License, TrustLevel
from .schemas import RegistrySchema

logger = logging.getLogger(__name__)

T = TypeVar("T")


def agent_cache_key(agent_id: int) -> str:
    return f"agent:{agent_id}"


def derive_trust_level(verified: bool, licenses: Tuple[License, ...]) -> TrustLevel:
    """
    0 = unverified, 1 = human verified or co-signed, 2 = holds an active license.

    An active license always yields LICENSED, whatever the verified flag says.
    """
    if any(lic.active for lic in licenses):
        return TrustLevel.LICENSED
    if verified:
        return TrustLevel.VERIFIED
    return TrustLevel.UNVERIFIED


async def _or_default(label: str, awaitable: Awaitable[T], default: T) -> T:
    """Await a read, absorbing any failure into ``default``."""
    try:
        return await awaitable
    except Exception as e:
        logger.debug(f"{label} failed, using default: {e}")
        return default


class RecordAssembler:
    """Resolves a Birth Certificate id into a cached AgentRecord."""

    def __init__(self, gateway: RemoteReadGateway, schema: RegistrySchema, cache: TTLCache):
        self.gateway = gateway
        self.schema = schema
        self.cache = cache

    async def resolve_by_id(self, agent_id: int) -> Optional[AgentRecord]:
        """
        Return the record for ``agent_id`` or None.

        Core record and owner reads must succeed. Licenses, auxiliary
        verification/lineage fields and the token URI fall back to defaults.
        A partial record is never returned.
        """
        cache_key = agent_cache_key(agent_id)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            # Every read settles before the record is built
            core, owner, licenses, auxiliary, token_uri = await asyncio.gather(
                self.schema.fetch_core(agent_id),
                self.gateway.call(REGISTRY, "ownerOf", agent_id),
                _or_default(f"licenses({agent_id})", self.schema.fetch_licenses(agent_id), ()),
                _or_default(f"auxiliary({agent_id})", self.schema.fetch_auxiliary(agent_id), AuxiliaryFields()),
                _or_default(f"tokenURI({agent_id})", self.gateway.call(REGISTRY, "tokenURI", agent_id), ""),
                return_exceptions=True,
            )
            if isinstance(core, Exception):
                raise core
            if isinstance(owner, Exception):
                raise owner

            agent = self._build(agent_id, core, owner, licenses, auxiliary, token_uri)
        except Exception as e:
            logger.warning(f"Could not assemble agent {agent_id}: {e}")
            return None

        self.cache.set(cache_key, agent)
        logger.info(f"Assembled agent {agent_id} ({agent.name}), trust level {int(agent.trust_level)}")
        return agent

    def _build(
        self,
        agent_id: int,
        core: CoreFields,
        owner: str,
        licenses: Tuple[License, ...],
        auxiliary: AuxiliaryFields,
        token_uri: str,
    ) -> AgentRecord:
        verified = core.verified if core.verified is not None else auxiliary.verified
        lineage = core.lineage if core.lineage is not None else auxiliary.lineage
        licenses = tuple(licenses)
        return AgentRecord(
            id=agent_id,
            name=core.name,
            agent_type=core.agent_type,
            owner=owner,
            birth=core.birth,
            active=core.active and auxiliary.valid is not False,
            verified=verified,
            lineage=lineage,
            licenses=licenses,
            trust_level=derive_trust_level(verified, licenses),
            metadata_uri=token_uri or "",
            platform=core.platform,
            creator=core.creator,
            human_principal=core.human_principal,
        )
