"""
Remote read gateway
Executes read-only contract calls against the ORIGIN registry, token and faucet
"""

import asyncio
import logging
from typing import Any, Dict, Protocol

from eth_utils import to_checksum_address
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.contract import AsyncContract

from .config import OriginSettings
from .contracts import get_abi
from .exceptions import RemoteReadError

logger = logging.getLogger(__name__)

REGISTRY = "registry"
TOKEN = "token"
FAUCET = "faucet"


class RemoteReadGateway(Protocol):
    """Anything that can execute a named view call on a named data source."""

    async def call(self, source: str, function: str, *args: Any) -> Any:
        ...


class Web3Gateway:
    """RemoteReadGateway backed by an AsyncWeb3 HTTP provider."""

    def __init__(self, settings: OriginSettings, registry_abi_name: str = "OriginRegistry"):
        self.settings = settings
        self.w3 = AsyncWeb3(AsyncHTTPProvider(settings.rpc_url))
        self.contracts: Dict[str, AsyncContract] = {
            REGISTRY: self._load_contract(settings.registry_address, registry_abi_name),
            TOKEN: self._load_contract(settings.token_address, "ClamsToken"),
            FAUCET: self._load_contract(settings.faucet_address, "OriginFaucet"),
        }

    def _load_contract(self, address: str, contract_name: str) -> AsyncContract:
        abi = get_abi(contract_name)
        if not abi:
            raise ValueError(f"No ABI found for {contract_name}")
        return self.w3.eth.contract(address=to_checksum_address(address), abi=abi)

    async def close(self) -> None:
        """Release the provider's HTTP session pool."""
        await self.w3.provider.disconnect()

    async def call(self, source: str, function: str, *args: Any) -> Any:
        contract = self.contracts.get(source)
        if contract is None:
            raise RemoteReadError(source, function, "unknown data source", args)
        try:
            fn = getattr(contract.functions, function)
            return await asyncio.wait_for(fn(*args).call(), timeout=self.settings.call_timeout)
        except asyncio.TimeoutError as exc:
            raise RemoteReadError(
                source, function, f"timed out after {self.settings.call_timeout}s", args
            ) from exc
        except Exception as exc:
            raise RemoteReadError(source, function, str(exc) or type(exc).__name__, args) from exc
