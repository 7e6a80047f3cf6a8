import asyncio
from typing import Any, Dict, List, Tuple

import pytest

from origin_identity.client import Origin
from origin_identity.config import OriginSettings
from origin_identity.contracts import ZERO_ADDRESS
from origin_identity.exceptions import RemoteReadError
from origin_identity.gateway import FAUCET, REGISTRY, TOKEN

ALICE = "0xAbCdEf0123456789aBcDeF0123456789AbCdEf01"
BOB = "0x1111111111111111111111111111111111111111"
CAROL = "0x2222222222222222222222222222222222222222"
PRINCIPAL = "0x3333333333333333333333333333333333333333"


def _normalize(args: Tuple[Any, ...]) -> Tuple[Any, ...]:
    return tuple(a.lower() if isinstance(a, str) and a.startswith("0x") else a for a in args)


class FakeGateway:
    """In-memory RemoteReadGateway that records every call."""

    def __init__(self):
        self.responses: Dict[Tuple[Any, ...], Any] = {}
        self.calls: List[Tuple[Any, ...]] = []

    def set(self, source: str, function: str, *args: Any, value: Any = None) -> None:
        self.responses[(source, function, _normalize(args))] = value

    def fail(self, source: str, function: str, *args: Any) -> None:
        self.responses[(source, function, _normalize(args))] = RemoteReadError(source, function, "execution reverted", args)

    async def call(self, source: str, function: str, *args: Any) -> Any:
        key = (source, function, _normalize(args))
        self.calls.append(key)
        await asyncio.sleep(0)
        if key not in self.responses:
            raise RemoteReadError(source, function, "execution reverted", args)
        value = self.responses[key]
        if isinstance(value, Exception):
            raise value
        return value

    def count(self, function: str, source: str = REGISTRY) -> int:
        return sum(1 for call in self.calls if call[0] == source and call[1] == function)

    def reset_calls(self) -> None:
        self.calls.clear()

    # -- registry helpers --------------------------------------------------
    def add_agent(
        self,
        agent_id: int,
        owner: str,
        name: str = "Suppi",
        agent_type: str = "assistant",
        human_principal: str = ZERO_ADDRESS,
        parent_id: int = 0,
        depth: int = 0,
        licenses: Tuple[Tuple[str, str, str, str, bool], ...] = (),
        token_uri: str = "",
        active: bool = True,
    ) -> None:
        """Register a V1 record (core tuple, licenses, isValid, owner, tokenURI)."""
        self.set(
            REGISTRY,
            "getAgent",
            agent_id,
            value=(
                name,
                agent_type,
                "openclaw",
                CAROL,
                parent_id,
                human_principal,
                depth,
                1_700_000_000 + agent_id,
                b"\x00" * 32,
                active,
            ),
        )
        self.set(REGISTRY, "getLicenses", agent_id, value=list(licenses))
        self.set(REGISTRY, "isValid", agent_id, value=active)
        self.set(REGISTRY, "ownerOf", agent_id, value=owner)
        self.set(REGISTRY, "tokenURI", agent_id, value=token_uri)

    def set_total(self, total: int) -> None:
        self.set(REGISTRY, "totalAgents", value=total)

    def set_balance(self, address: str, balance: int) -> None:
        self.set(REGISTRY, "balanceOf", address, value=balance)


class ManualClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def origin(gateway: FakeGateway) -> Origin:
    return Origin(settings=OriginSettings(), gateway=gateway)


__all__ = ["FakeGateway", "ManualClock", "ALICE", "BOB", "CAROL", "PRINCIPAL", "REGISTRY", "TOKEN", "FAUCET"]
