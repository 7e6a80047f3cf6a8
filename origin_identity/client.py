"""
ORIGIN client
Three lines of code to verify any AI agent:

    origin = Origin()
    result = await origin.verify_by_address("0xAgentWallet")
    if result.verified: ...
"""

import asyncio
import logging
from typing import List, Optional

from eth_utils import to_checksum_address

from .assembler import RecordAssembler
from .cache import TTLCache
from .config import OriginSettings
from .gateway import FAUCET, REGISTRY, TOKEN, RemoteReadGateway, Web3Gateway
from .models import AgentRecord, ClamsBalance, ProtocolStats, VerificationResult
from .resolver import OwnerResolver
from .schemas import SCHEMAS, RegistrySchema, get_schema
from .units import format_units

logger = logging.getLogger(__name__)

STATS_CACHE_KEY = "stats"

NOT_REGISTERED = "not registered: no Birth Certificate found for {address}"
REGISTRY_INCONSISTENT = "Birth Certificate exists but agent data not found (registry inconsistency)"
NO_RECORD_AT_ID = "no record at id {agent_id}"


class Origin:
    """Read-only verification client for the ORIGIN agent registry."""

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        cache_ttl: Optional[int] = None,
        settings: Optional[OriginSettings] = None,
        gateway: Optional[RemoteReadGateway] = None,
        schema: Optional[RegistrySchema] = None,
    ):
        """
        Args:
            rpc_url: RPC endpoint override (defaults to the public Base RPC)
            cache_ttl: cache TTL in milliseconds (default 30000)
            settings: fully resolved settings; rpc_url/cache_ttl still override
            gateway: remote read gateway, built from settings when omitted
            schema: registry schema adapter, chosen from settings when omitted
        """
        if settings is None:
            settings = OriginSettings.load(rpc_url=rpc_url, cache_ttl_ms=cache_ttl)
        elif rpc_url is not None or cache_ttl is not None:
            updates = {"rpc_url": rpc_url, "cache_ttl_ms": cache_ttl}
            settings = OriginSettings(**{**settings.model_dump(), **{k: v for k, v in updates.items() if v is not None}})
        self.settings = settings

        self.gateway = gateway or Web3Gateway(settings, registry_abi_name=SCHEMAS[settings.registry_schema].abi_name)
        self.schema = schema or get_schema(settings.registry_schema, self.gateway)
        self.cache = TTLCache(ttl_ms=settings.cache_ttl_ms)
        self.assembler = RecordAssembler(self.gateway, self.schema, self.cache)
        self.resolver = OwnerResolver(self.gateway, self.assembler)

    # ------------------------------------------------------------------ #
    # Verification
    # ------------------------------------------------------------------ #
    async def verify_by_address(self, address: str) -> VerificationResult:
        """Verify an agent by wallet address. Never raises."""
        try:
            checksum = to_checksum_address(address)
            balance = int(await self.gateway.call(REGISTRY, "balanceOf", checksum))
            if balance == 0:
                return VerificationResult.failure(NOT_REGISTERED.format(address=address))

            agent = await self.resolver.resolve_by_owner(checksum)
            if agent is None:
                logger.warning(f"{address} holds {balance} Birth Certificate(s) but the owner scan found none")
                return VerificationResult.failure(REGISTRY_INCONSISTENT)

            return VerificationResult.success(agent)
        except Exception as e:
            logger.warning(f"Verification of {address} failed: {e}")
            return VerificationResult.failure(str(e) or "Verification failed")

    async def verify_by_id(self, agent_id: int) -> VerificationResult:
        """Verify an agent by Birth Certificate id. Never raises."""
        try:
            agent = await self.assembler.resolve_by_id(agent_id)
        except Exception as e:
            logger.warning(f"Verification of agent {agent_id} failed: {e}")
            return VerificationResult.failure(str(e) or "Verification failed")
        if agent is None:
            return VerificationResult.failure(NO_RECORD_AT_ID.format(agent_id=agent_id))
        return VerificationResult.success(agent)

    async def is_registered(self, address: str) -> bool:
        """Does this address hold a Birth Certificate?"""
        try:
            balance = await self.gateway.call(REGISTRY, "balanceOf", to_checksum_address(address))
            return int(balance) > 0
        except Exception as e:
            logger.debug(f"is_registered({address}) treated as False: {e}")
            return False

    async def has_claimed(self, address: str) -> bool:
        """Has this address claimed from the CLAMS faucet?"""
        try:
            return bool(await self.gateway.call(FAUCET, "hasClaimed", to_checksum_address(address)))
        except Exception as e:
            logger.debug(f"has_claimed({address}) treated as False: {e}")
            return False

    # ------------------------------------------------------------------ #
    # Agent data
    # ------------------------------------------------------------------ #
    async def resolve_by_id(self, agent_id: int) -> Optional[AgentRecord]:
        return await self.assembler.resolve_by_id(agent_id)

    async def resolve_by_owner(self, address: str) -> Optional[AgentRecord]:
        try:
            return await self.resolver.resolve_by_owner(to_checksum_address(address))
        except Exception as e:
            logger.warning(f"Owner lookup for {address} failed: {e}")
            return None

    async def get_agents_by_creator(self, address: str) -> List[int]:
        try:
            ids = await self.gateway.call(REGISTRY, "getAgentsByCreator", to_checksum_address(address))
            return [int(agent_id) for agent_id in ids]
        except Exception as e:
            logger.debug(f"getAgentsByCreator({address}) failed: {e}")
            return []

    async def get_child_agents(self, parent_id: int) -> List[int]:
        try:
            ids = await self.gateway.call(REGISTRY, "getChildAgents", parent_id)
            return [int(agent_id) for agent_id in ids]
        except Exception as e:
            logger.debug(f"getChildAgents({parent_id}) failed: {e}")
            return []

    async def has_license(self, agent_id: int, license_type: str) -> bool:
        try:
            return bool(await self.gateway.call(REGISTRY, "hasLicense", agent_id, license_type))
        except Exception as e:
            logger.debug(f"hasLicense({agent_id}, {license_type}) failed: {e}")
            return False

    async def is_valid(self, agent_id: int) -> bool:
        try:
            return bool(await self.gateway.call(REGISTRY, "isValid", agent_id))
        except Exception as e:
            logger.debug(f"isValid({agent_id}) failed: {e}")
            return False

    # ------------------------------------------------------------------ #
    # Protocol stats and CLAMS token
    # ------------------------------------------------------------------ #
    async def get_total_agents(self) -> int:
        """Uncached. Raises RemoteReadError."""
        return await self.resolver.total_agents()

    async def get_stats(self) -> ProtocolStats:
        """
        Cached protocol counters.

        Claims and supply fall back to 0 / "0"; a failed total-agents read
        raises RemoteReadError.
        """
        cached = self.cache.get(STATS_CACHE_KEY)
        if cached is not None:
            return cached

        total_agents, total_claims, total_supply = await asyncio.gather(
            self.resolver.total_agents(),
            self._total_claims(),
            self._total_supply(),
            return_exceptions=True,
        )
        if isinstance(total_agents, Exception):
            raise total_agents
        if isinstance(total_claims, Exception):
            logger.debug(f"totalClaims failed, reporting 0: {total_claims}")
            total_claims = 0
        if isinstance(total_supply, Exception):
            logger.debug(f"totalSupply failed, reporting 0: {total_supply}")
            total_supply = "0"

        stats = ProtocolStats(
            total_registered=total_agents,
            total_claims=total_claims,
            total_clams_supply=total_supply,
        )
        self.cache.set(STATS_CACHE_KEY, stats)
        return stats

    async def get_balance(self, address: str) -> ClamsBalance:
        """Uncached CLAMS balance. Raises RemoteReadError when the balance read fails."""
        raw, decimals = await asyncio.gather(
            self.gateway.call(TOKEN, "balanceOf", to_checksum_address(address)),
            self._decimals(),
            return_exceptions=True,
        )
        if isinstance(raw, Exception):
            raise raw
        formatted = format_units(int(raw), decimals)
        return ClamsBalance(raw=int(raw), formatted=formatted, amount=float(formatted))

    get_clams_balance = get_balance

    def clear_cache(self) -> None:
        self.cache.clear()

    async def close(self) -> None:
        """Release network resources held by the gateway."""
        close = getattr(self.gateway, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "Origin":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _total_claims(self) -> int:
        try:
            return int(await self.gateway.call(FAUCET, "totalClaims"))
        except Exception as e:
            logger.debug(f"totalClaims failed, reporting 0: {e}")
            return 0

    async def _total_supply(self) -> str:
        supply, decimals = await asyncio.gather(
            self.gateway.call(TOKEN, "totalSupply"),
            self._decimals(),
            return_exceptions=True,
        )
        if isinstance(supply, Exception):
            logger.debug(f"totalSupply failed, reporting 0: {supply}")
            return "0"
        return format_units(int(supply), decimals)

    async def _decimals(self) -> int:
        try:
            return int(await self.gateway.call(TOKEN, "decimals"))
        except Exception as e:
            logger.debug(f"decimals() failed, assuming {self.settings.token_decimals}: {e}")
            return self.settings.token_decimals
