"""Testes para app.payload.service_helper (fachada)."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

from api.payload_builders.apps import TaxProviderPayload
from app.domain import AppIdentity, Cart, Context, SalesChannelContext, Source
from app.infra.in_app_purchase import InAppPurchaseRegistry
from app.payload import (
    APP_REQUEST_CONTEXT,
    APP_REQUEST_TYPE,
    APP_SECRET,
    AppPayloadServiceHelper,
    AppRegistrationError,
)


@pytest.fixture
def purchases() -> InAppPurchaseRegistry:
    registry = InAppPurchaseRegistry()
    registry.register_purchases(
        {
            "purchase-1": "app-id",
            "purchase-2": "app-id",
            "purchase-3": "another-app-id",
        }
    )
    return registry


@pytest.fixture
def helper(purchases: InAppPurchaseRegistry) -> AppPayloadServiceHelper:
    shop_id_provider = MagicMock()
    shop_id_provider.get_shop_id.return_value = "shop-id"
    return AppPayloadServiceHelper(
        definition_registry=MagicMock(),
        entity_encoder=MagicMock(),
        shop_id_provider=shop_id_provider,
        in_app_purchases=purchases,
        app_url="https://shopware.com",
    )


class TestAppPayloadServiceHelper:
    """Testes da fachada build_source/encode/create_request_options."""

    def test_build_source(self, helper: AppPayloadServiceHelper) -> None:
        """Source com purchases apenas do app."""
        app = AppIdentity(id="app-id", name="MyApp", version="1.0.0")

        source = helper.build_source(app)

        assert source.url == "https://shopware.com"
        assert source.shop_id == "shop-id"
        assert source.app_version == "1.0.0"
        assert list(source.in_app_purchases) == ["purchase-1", "purchase-2"]

    def test_encode(self, helper: AppPayloadServiceHelper) -> None:
        """Encode mantém as chaves declaradas e zera o contexto."""
        payload = TaxProviderPayload(
            cart=Cart(token="cart"),
            context=SalesChannelContext(token="ctx", sales_channel_id="sc"),
        )
        payload.set_source(Source(url="https://shopware.com", shop_id="shop-id"))

        result = helper.encode(payload)

        assert set(result) == {"source", "cart", "context"}
        assert result["context"] == {}

    def test_create_request_options(self, helper: AppPayloadServiceHelper) -> None:
        """Opções completas para app com secret."""
        app = AppIdentity(id="app-id", name="MyApp", version="1.0.0", app_secret="top-secret")
        payload = MagicMock()
        payload.json_serialize.return_value = {"key": "value"}
        context = Context.create_default()

        options = helper.create_request_options(payload, app, context, {"timeout": 50})

        assert options[APP_REQUEST_CONTEXT] is context
        assert options[APP_REQUEST_TYPE][APP_SECRET] == "top-secret"
        assert options["timeout"] == 50
        assert json.loads(options["body"]) == {"key": "value"}

    def test_create_request_options_missing_secret(
        self,
        helper: AppPayloadServiceHelper,
    ) -> None:
        """App sem secret falha e o payload não recebe source."""
        app = AppIdentity(id="app-id", name="TestApp", version="1.0.0")
        payload = MagicMock()

        with pytest.raises(AppRegistrationError):
            helper.create_request_options(payload, app, Context.create_default())

        payload.set_source.assert_not_called()
