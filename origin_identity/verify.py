"""
Standalone verify functions
For when you just want one function, not a client instance:

    from origin_identity import verify_agent

    result = await verify_agent("0xAgentWallet")
    if result.verified:
        print(f"{result.agent.name} is verified (trust level {result.trust_level})")
"""

from typing import Optional

from .client import Origin
from .models import VerificationResult

# Created on first use, configured from the environment
_default_client: Optional[Origin] = None


def get_default_client() -> Origin:
    """Return the shared default client, creating it on first call."""
    global _default_client
    if _default_client is None:
        _default_client = Origin()
    return _default_client


def reset_default_client() -> None:
    """
    Drop the shared default client; the next call builds a fresh one.

    Does not release the dropped client's HTTP session, use close_default_client()
    from async code for that.
    """
    global _default_client
    _default_client = None


async def close_default_client() -> None:
    """Close the shared default client, if one was created, and drop it."""
    global _default_client
    client, _default_client = _default_client, None
    if client is not None:
        await client.close()


async def verify_agent(address: str) -> VerificationResult:
    """Verify an agent by wallet address."""
    return await get_default_client().verify_by_address(address)


async def verify_agent_by_id(agent_id: int) -> VerificationResult:
    """Verify an agent by Birth Certificate id."""
    return await get_default_client().verify_by_id(agent_id)


async def is_registered(address: str) -> bool:
    """Quick boolean check: does this address have a Birth Certificate?"""
    return await get_default_client().is_registered(address)


async def has_claimed(address: str) -> bool:
    """Check if an address has claimed from the CLAMS faucet."""
    return await get_default_client().has_claimed(address)
