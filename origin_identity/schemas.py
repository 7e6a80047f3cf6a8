"""
Registry schema adapters.

The registry contract exists in more than one version. Each adapter turns the
version's raw view calls into the normalized ``CoreFields``, ``License`` and
``AuxiliaryFields`` models so the record assembler never sees a raw tuple.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, Tuple, Type

from .contracts import ZERO_ADDRESS
from .exceptions import OriginConfigurationError
from .gateway import REGISTRY, RemoteReadGateway
from .models import AuxiliaryFields, CoreFields, License, Lineage

logger = logging.getLogger(__name__)

# Upper bound on licenses read per agent, and on concurrent getLicense calls
MAX_LICENSES = 256
LICENSE_READ_CONCURRENCY = 8


class RegistrySchema(ABC):
    """Reads one registry version and returns normalized fields."""

    version: str = ""
    abi_name: str = ""

    def __init__(self, gateway: RemoteReadGateway):
        self.gateway = gateway

    async def _read(self, function: str, *args):
        return await self.gateway.call(REGISTRY, function, *args)

    @abstractmethod
    async def fetch_core(self, agent_id: int) -> CoreFields:
        """Read the core record. Raises on failure."""

    @abstractmethod
    async def fetch_licenses(self, agent_id: int) -> Tuple[License, ...]:
        """Read the licenses in registry order. Raises on failure."""

    @abstractmethod
    async def fetch_auxiliary(self, agent_id: int) -> AuxiliaryFields:
        """Read verification/lineage fields kept outside the core record."""


class RegistryV1Schema(RegistrySchema):
    """
    Deployed OriginRegistry.

    getAgent carries creator, human principal and lineage; licenses come from
    one batched getLicenses call; isValid is the only auxiliary read.
    """

    version = "v1"
    abi_name = "OriginRegistry"

    async def fetch_core(self, agent_id: int) -> CoreFields:
        (
            name,
            agent_type,
            platform,
            creator,
            parent_agent_id,
            human_principal,
            lineage_depth,
            birth_timestamp,
            _public_key_hash,
            active,
        ) = await self._read("getAgent", agent_id)
        has_principal = bool(human_principal) and human_principal.lower() != ZERO_ADDRESS
        return CoreFields(
            name=name,
            agent_type=agent_type,
            birth=int(birth_timestamp),
            active=bool(active),
            platform=platform,
            creator=creator,
            human_principal=human_principal if has_principal else None,
            verified=has_principal,
            lineage=Lineage(parent_id=int(parent_agent_id), depth=int(lineage_depth)),
        )

    async def fetch_licenses(self, agent_id: int) -> Tuple[License, ...]:
        raw = await self._read("getLicenses", agent_id)
        return tuple(
            License(
                type=license_type,
                identifier=license_number,
                holder=holder or None,
                jurisdiction=jurisdiction or None,
                active=bool(active),
            )
            for license_type, license_number, holder, jurisdiction, active in raw
        )

    async def fetch_auxiliary(self, agent_id: int) -> AuxiliaryFields:
        valid = await self._read("isValid", agent_id)
        return AuxiliaryFields(valid=bool(valid))


class RegistryV2Schema(RegistrySchema):
    """
    OriginRegistry V2.

    getAgent only carries name, type, birth block and active flag. The verified
    flag and lineage have their own accessors; licenses are read by index.
    """

    version = "v2"
    abi_name = "OriginRegistryV2"

    async def fetch_core(self, agent_id: int) -> CoreFields:
        name, agent_type, birth_block, active = await self._read("getAgent", agent_id)
        return CoreFields(name=name, agent_type=agent_type, birth=int(birth_block), active=bool(active))

    async def fetch_licenses(self, agent_id: int) -> Tuple[License, ...]:
        count = int(await self._read("getLicenseCount", agent_id))
        if count == 0:
            return ()
        if count > MAX_LICENSES:
            raise ValueError(f"getLicenseCount({agent_id}) returned {count}, above the {MAX_LICENSES} limit")

        semaphore = asyncio.Semaphore(LICENSE_READ_CONCURRENCY)

        async def read_license(index: int):
            async with semaphore:
                return await self._read("getLicense", agent_id, index)

        # gather keeps index order regardless of completion order
        raw = await asyncio.gather(
            *(read_license(index) for index in range(count)),
            return_exceptions=True,
        )
        for item in raw:
            if isinstance(item, Exception):
                raise item
        return tuple(
            License(type=license_type, identifier=license_id, issued_at=int(issued_at))
            for license_type, license_id, issued_at in raw
        )

    async def fetch_auxiliary(self, agent_id: int) -> AuxiliaryFields:
        verified, lineage = await asyncio.gather(
            self._read("isVerified", agent_id),
            self._read("getLineage", agent_id),
            return_exceptions=True,
        )
        if isinstance(verified, Exception):
            logger.debug(f"isVerified({agent_id}) failed, treating as unverified: {verified}")
            verified = False
        if isinstance(lineage, Exception):
            logger.debug(f"getLineage({agent_id}) failed, treating as root lineage: {lineage}")
            lineage = (0, 0)
        parent_id, depth = lineage
        return AuxiliaryFields(verified=bool(verified), lineage=Lineage(parent_id=int(parent_id), depth=int(depth)))


SCHEMAS: Dict[str, Type[RegistrySchema]] = {
    RegistryV1Schema.version: RegistryV1Schema,
    RegistryV2Schema.version: RegistryV2Schema,
}


def get_schema(version: str, gateway: RemoteReadGateway) -> RegistrySchema:
    schema_cls = SCHEMAS.get(version.lower())
    if schema_cls is None:
        raise OriginConfigurationError(f"Unsupported registry schema: {version}")
    return schema_cls(gateway)
