"""
ORIGIN Identity SDK
Read-only verification of AI agent Birth Certificates on the ORIGIN registry
"""

from .models import (
    AgentRecord,
    License,
    Lineage,
    TrustLevel,
    VerificationResult,
    ProtocolStats,
    ClamsBalance,
)
from .config import OriginSettings
from .exceptions import OriginError, OriginConfigurationError, RemoteReadError
from .client import Origin
from .verify import (
    verify_agent,
    verify_agent_by_id,
    is_registered,
    has_claimed,
    get_default_client,
    reset_default_client,
    close_default_client,
)
from .contracts import CONTRACTS, CHAIN_ID

__all__ = [
    "Origin",
    "OriginSettings",
    "AgentRecord",
    "License",
    "Lineage",
    "TrustLevel",
    "VerificationResult",
    "ProtocolStats",
    "ClamsBalance",
    "OriginError",
    "OriginConfigurationError",
    "RemoteReadError",
    "verify_agent",
    "verify_agent_by_id",
    "is_registered",
    "has_claimed",
    "get_default_client",
    "reset_default_client",
    "close_default_client",
    "CONTRACTS",
    "CHAIN_ID",
]
