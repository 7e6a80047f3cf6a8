"""
Data models for ORIGIN agent identity
Birth Certificate records, licenses and verification results
"""

from typing import Optional, Tuple
from enum import IntEnum
from pydantic import BaseModel, Field


class TrustLevel(IntEnum):
    """Coarse trust classification derived from a Birth Certificate"""
    UNVERIFIED = 0
    VERIFIED = 1
    LICENSED = 2


class License(BaseModel):
    """Professional license attached to a Birth Certificate"""
    type: str = Field(..., description="License type (e.g. MLO, Real Estate, Series 7)")
    identifier: str = Field(..., alias="id", description="License number")
    issued_at: int = Field(0, alias="issuedAt", description="Block timestamp when attached")
    active: bool = Field(True, description="Whether the license is currently active")
    holder: Optional[str] = Field(None, description="License holder name")
    jurisdiction: Optional[str] = Field(None, description="Issuing jurisdiction")

    class Config:
        populate_by_name = True
        frozen = True


class Lineage(BaseModel):
    """Who created the agent"""
    parent_id: int = Field(0, alias="parentId", ge=0, description="Parent agent id, 0 for human-created")
    depth: int = Field(0, ge=0, description="Depth from human origin")

    class Config:
        populate_by_name = True
        frozen = True


class CoreFields(BaseModel):
    """
    Normalized core record read from the registry.

    ``verified`` and ``lineage`` are None when the registry version keeps them
    outside the core record.
    """
    name: str
    agent_type: str
    birth: int = 0
    active: bool = True
    platform: Optional[str] = None
    creator: Optional[str] = None
    human_principal: Optional[str] = None
    verified: Optional[bool] = None
    lineage: Optional[Lineage] = None

    class Config:
        frozen = True


class AuxiliaryFields(BaseModel):
    """Verification and lineage fields read separately from the core record"""
    verified: bool = False
    lineage: Lineage = Field(default_factory=Lineage)
    valid: Optional[bool] = None

    class Config:
        frozen = True


class AgentRecord(BaseModel):
    """An agent's on-chain Birth Certificate"""
    id: int = Field(..., ge=1, description="On-chain token id")
    name: str = Field(..., description="Agent name")
    agent_type: str = Field(..., alias="agentType", description="assistant, trader, guardian, ...")
    owner: str = Field(..., description="Wallet that owns the Birth Certificate")
    birth: int = Field(0, description="Birth block or timestamp, depending on registry version")
    active: bool = Field(True)
    verified: bool = Field(False, alias="isVerified", description="Human co-signed or verified")
    lineage: Lineage = Field(default_factory=Lineage)
    licenses: Tuple[License, ...] = Field(default_factory=tuple)
    trust_level: TrustLevel = Field(TrustLevel.UNVERIFIED, alias="trustLevel")
    metadata_uri: str = Field("", alias="tokenURI")
    platform: Optional[str] = Field(None)
    creator: Optional[str] = Field(None)
    human_principal: Optional[str] = Field(None, alias="humanPrincipal")

    class Config:
        populate_by_name = True
        frozen = True

    @property
    def active_licenses(self) -> Tuple[License, ...]:
        return tuple(lic for lic in self.licenses if lic.active)


class VerificationResult(BaseModel):
    """Answer to a verification query"""
    verified: bool
    trust_level: TrustLevel = Field(TrustLevel.UNVERIFIED, alias="trustLevel")
    agent: Optional[AgentRecord] = None
    error: Optional[str] = None

    class Config:
        populate_by_name = True
        frozen = True

    @classmethod
    def success(cls, agent: AgentRecord) -> "VerificationResult":
        return cls(verified=True, trust_level=agent.trust_level, agent=agent)

    @classmethod
    def failure(cls, error: str) -> "VerificationResult":
        return cls(verified=False, trust_level=TrustLevel.UNVERIFIED, agent=None, error=error)


class ProtocolStats(BaseModel):
    """Protocol-wide counters"""
    total_registered: int = Field(0, alias="totalRegistered", description="Birth Certificates minted")
    total_claims: int = Field(0, alias="totalClaims", description="Faucet claims")
    total_clams_supply: str = Field("0", alias="totalClamsSupply", description="Formatted CLAMS supply")

    class Config:
        populate_by_name = True
        frozen = True


class ClamsBalance(BaseModel):
    """CLAMS token balance"""
    raw: int = Field(..., description="Balance in base units")
    formatted: str = Field(..., description="Human-readable decimal string")
    amount: float = Field(..., description="Float approximation, lossy for very large balances")

    class Config:
        frozen = True
