"""Unit tests for DomainHelper."""

import pytest

from authn.config import Settings
from authn.domain.service import DomainHelper, PlatformService
from authn.domain.value import PlatformId
from authn.persistence.repository.inmemory import InMemoryPlatformRepository
from tests.factories import make_platform


@pytest.fixture
def platform_repo():
    return InMemoryPlatformRepository()


@pytest.fixture
def helper(platform_repo, settings):
    return DomainHelper(PlatformService(platform_repo), settings)


@pytest.mark.asyncio
async def test_without_platform_uses_frontend_url(helper):
    url = await helper.get_internal_url(path="/redirect", platform_id=None)

    assert url == "http://localhost:4200/redirect"


@pytest.mark.asyncio
async def test_custom_domain_platform_gets_own_host(helper, platform_repo):
    await platform_repo.save(make_platform("p1", custom_domain="flows.acme.com"))

    url = await helper.get_internal_url(path="redirect", platform_id=PlatformId("p1"))

    assert url == "http://flows.acme.com/redirect"


@pytest.mark.asyncio
async def test_platform_without_custom_domain_uses_frontend_url(
    helper, platform_repo
):
    await platform_repo.save(make_platform("p1"))

    url = await helper.get_internal_url(path="/redirect", platform_id=PlatformId("p1"))

    assert url == "http://localhost:4200/redirect"


@pytest.mark.asyncio
async def test_production_uses_https(platform_repo):
    settings = Settings(environment="production", frontend_host="cloud.example.com")
    helper = DomainHelper(PlatformService(platform_repo), settings)
    await platform_repo.save(make_platform("p1", custom_domain="flows.acme.com"))

    assert (
        await helper.get_internal_url(path="/redirect", platform_id=None)
        == "https://cloud.example.com/redirect"
    )
    assert (
        await helper.get_internal_url(path="/redirect", platform_id=PlatformId("p1"))
        == "https://flows.acme.com/redirect"
    )
