import asyncio

import pytest

from origin_identity.exceptions import OriginConfigurationError
from origin_identity.models import Lineage
from origin_identity.schemas import (
    LICENSE_READ_CONCURRENCY,
    MAX_LICENSES,
    RegistryV1Schema,
    RegistryV2Schema,
    get_schema,
)

from conftest import ALICE, PRINCIPAL, REGISTRY, FakeGateway


def test_get_schema_selects_by_version(gateway):
    assert isinstance(get_schema("v1", gateway), RegistryV1Schema)
    assert isinstance(get_schema("V2", gateway), RegistryV2Schema)
    with pytest.raises(OriginConfigurationError):
        get_schema("v3", gateway)


@pytest.mark.asyncio
async def test_v1_core_normalizes_principal_and_lineage(gateway):
    gateway.add_agent(4, ALICE, human_principal=PRINCIPAL, parent_id=2, depth=1)
    core = await RegistryV1Schema(gateway).fetch_core(4)
    assert core.verified is True
    assert core.human_principal == PRINCIPAL
    assert core.lineage == Lineage(parent_id=2, depth=1)
    assert core.platform == "openclaw"


@pytest.mark.asyncio
async def test_v1_zero_principal_is_unverified(gateway):
    gateway.add_agent(1, ALICE)
    core = await RegistryV1Schema(gateway).fetch_core(1)
    assert core.verified is False
    assert core.human_principal is None


@pytest.mark.asyncio
async def test_v1_licenses_keep_registry_order(gateway):
    gateway.add_agent(
        1,
        ALICE,
        licenses=(
            ("MLO", "154083", "Jane Doe", "CA", True),
            ("Series 7", "A-1", "", "", False),
        ),
    )
    licenses = await RegistryV1Schema(gateway).fetch_licenses(1)
    assert [lic.type for lic in licenses] == ["MLO", "Series 7"]
    assert licenses[0].identifier == "154083"
    assert licenses[0].jurisdiction == "CA"
    assert licenses[1].holder is None
    assert licenses[1].active is False


@pytest.mark.asyncio
async def test_v2_reads_licenses_by_index(gateway):
    gateway.set(REGISTRY, "getLicenseCount", 7, value=2)
    gateway.set(REGISTRY, "getLicense", 7, 0, value=("MLO", "154083", 100))
    gateway.set(REGISTRY, "getLicense", 7, 1, value=("Real Estate", "RE-9", 200))
    licenses = await RegistryV2Schema(gateway).fetch_licenses(7)
    assert [(lic.type, lic.identifier, lic.issued_at) for lic in licenses] == [
        ("MLO", "154083", 100),
        ("Real Estate", "RE-9", 200),
    ]
    # V2 licenses carry no active flag
    assert all(lic.active for lic in licenses)


@pytest.mark.asyncio
async def test_v2_failed_license_index_fails_the_list(gateway):
    gateway.set(REGISTRY, "getLicenseCount", 7, value=2)
    gateway.set(REGISTRY, "getLicense", 7, 0, value=("MLO", "154083", 100))
    gateway.fail(REGISTRY, "getLicense", 7, 1)
    with pytest.raises(Exception):
        await RegistryV2Schema(gateway).fetch_licenses(7)


@pytest.mark.asyncio
async def test_v2_auxiliary_reads_default_independently(gateway):
    gateway.set(REGISTRY, "isVerified", 7, value=True)
    gateway.fail(REGISTRY, "getLineage", 7)
    aux = await RegistryV2Schema(gateway).fetch_auxiliary(7)
    assert aux.verified is True
    assert aux.lineage == Lineage()

    gateway.fail(REGISTRY, "isVerified", 7)
    gateway.set(REGISTRY, "getLineage", 7, value=(3, 2))
    aux = await RegistryV2Schema(gateway).fetch_auxiliary(7)
    assert aux.verified is False
    assert aux.lineage == Lineage(parent_id=3, depth=2)


@pytest.mark.asyncio
async def test_v2_core_has_no_inline_verification(gateway):
    gateway.set(REGISTRY, "getAgent", 7, value=("Scout", "trader", 123456, True))
    core = await RegistryV2Schema(gateway).fetch_core(7)
    assert core.birth == 123456
    assert core.verified is None
    assert core.lineage is None


class ConcurrencyTrackingGateway(FakeGateway):
    def __init__(self):
        super().__init__()
        self.in_flight = 0
        self.peak = 0

    async def call(self, source, function, *args):
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            await asyncio.sleep(0)
            return await super().call(source, function, *args)
        finally:
            self.in_flight -= 1


@pytest.mark.asyncio
async def test_v2_license_reads_are_bounded():
    gateway = ConcurrencyTrackingGateway()
    count = LICENSE_READ_CONCURRENCY * 3
    gateway.set(REGISTRY, "getLicenseCount", 7, value=count)
    for index in range(count):
        gateway.set(REGISTRY, "getLicense", 7, index, value=(f"L{index}", str(index), index))

    licenses = await RegistryV2Schema(gateway).fetch_licenses(7)

    assert [lic.type for lic in licenses] == [f"L{index}" for index in range(count)]
    assert gateway.peak <= LICENSE_READ_CONCURRENCY


@pytest.mark.asyncio
async def test_v2_oversized_license_count_is_rejected(gateway):
    gateway.set(REGISTRY, "getLicenseCount", 7, value=MAX_LICENSES + 1)
    with pytest.raises(ValueError):
        await RegistryV2Schema(gateway).fetch_licenses(7)
    assert gateway.count("getLicense") == 0
