"""Tests for the local auth and simulated store adapters."""

import pytest

from calearner.domain.billing.entities import Sku
from calearner.domain.common.exceptions import ValidationError
from calearner.domain.common.value_objects import IdentityId
from calearner.infrastructure.billing import SimulatedStoreService
from calearner.infrastructure.identity import LocalAuthService


class TestLocalAuthService:
    @pytest.mark.asyncio
    async def test_same_email_same_identity(self) -> None:
        auth = LocalAuthService()
        first = await auth.login("  Reader@Example.com ")
        second = await auth.login("reader@example.com")

        assert first.id == second.id
        assert first.email == "reader@example.com"
        assert len(first.id.value) == 16

    @pytest.mark.asyncio
    async def test_different_emails_differ(self) -> None:
        auth = LocalAuthService()
        assert (await auth.login("a@example.com")).id != (await auth.login("b@example.com")).id

    @pytest.mark.asyncio
    async def test_invalid_email_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            await LocalAuthService().login("not-an-email")

    @pytest.mark.asyncio
    async def test_logout_clears_current_identity(self) -> None:
        auth = LocalAuthService()
        await auth.login("reader@example.com")
        await auth.logout()
        assert auth.current is None

    def test_namespace_key(self) -> None:
        auth = LocalAuthService()
        assert auth.namespace_key("calearner_settings") == "calearner_settings"
        assert (
            auth.namespace_key("calearner_settings", IdentityId("u1")) == "calearner_settings_u1"
        )


class TestSimulatedStoreService:
    @pytest.mark.asyncio
    async def test_accepts_purchases(self) -> None:
        store = SimulatedStoreService(delay_seconds=0)
        assert await store.purchase(Sku.SUB_MONTHLY) is True

    @pytest.mark.asyncio
    async def test_always_decline(self) -> None:
        store = SimulatedStoreService(delay_seconds=0, always_decline=True)
        assert await store.purchase(Sku.TRACK_SINGLE) is False
