"""Testes para app.payload.request_options.

Cobre: secret no contexto de autenticação, body JSON, headers,
extra_options, chaves protegidas e falha por secret ausente.
"""

from __future__ import annotations

import json
import logging
import re
from unittest.mock import MagicMock

import pytest

from api.payload_builders.apps import PaymentPayload, TaxProviderPayload
from app.domain import (
    AppIdentity,
    Cart,
    Context,
    OrderEntity,
    OrderTransactionEntity,
    SalesChannelContext,
    Source,
)
from app.infra.in_app_purchase import InAppPurchaseRegistry
from app.payload import (
    APP_REQUEST_CONTEXT,
    APP_REQUEST_TYPE,
    APP_SECRET,
    VALIDATED_RESPONSE,
    AppRegistrationError,
)
from app.payload.normalizer import normalize_struct
from app.payload.request_options import RequestOptionsFactory
from app.payload.source_builder import SourceBuilder

APP_URL = "https://shop.example.com"


def _mock_payload() -> MagicMock:
    payload = MagicMock()
    payload.json_serialize.return_value = {"key": "value"}
    return payload


def _app(secret: str | None = "top-secret") -> AppIdentity:
    return AppIdentity(id="app-id", name="TestApp", version="1.0.0", app_secret=secret)


@pytest.fixture
def shop_id_provider() -> MagicMock:
    provider = MagicMock()
    provider.get_shop_id.return_value = "shop-id"
    return provider


@pytest.fixture
def factory(shop_id_provider: MagicMock) -> RequestOptionsFactory:
    builder = SourceBuilder(shop_id_provider, InAppPurchaseRegistry(), APP_URL)
    return RequestOptionsFactory(builder)


class TestCreateRequestOptions:
    """Testes para RequestOptionsFactory.create."""

    def test_without_extra_options(self, factory: RequestOptionsFactory) -> None:
        """Monta headers, body e contexto de autenticação."""
        context = Context.create_default()
        payload = _mock_payload()

        options = factory.create(payload, _app(), context)

        assert options[APP_REQUEST_CONTEXT] is context
        assert options[APP_REQUEST_TYPE][APP_SECRET] == "top-secret"
        assert options[APP_REQUEST_TYPE][VALIDATED_RESPONSE] is True
        assert options["headers"] == {"Content-Type": "application/json"}
        assert json.loads(options["body"]) == {"key": "value"}
        assert set(options) == {"headers", "body", APP_REQUEST_CONTEXT, APP_REQUEST_TYPE}

    def test_source_attached_once(self, factory: RequestOptionsFactory) -> None:
        """set_source é chamado uma vez com um Source."""
        payload = _mock_payload()

        factory.create(payload, _app(), Context.create_default())

        payload.set_source.assert_called_once()
        (source,) = payload.set_source.call_args.args
        assert isinstance(source, Source)
        assert source.shop_id == "shop-id"

    def test_with_extra_options(self, factory: RequestOptionsFactory) -> None:
        """Extras (ex: timeout) são mesclados ao resultado."""
        options = factory.create(
            _mock_payload(),
            _app(),
            Context.create_default(),
            {"timeout": 50},
        )

        assert options["timeout"] == 50
        assert options["headers"] == {"Content-Type": "application/json"}
        assert options[APP_REQUEST_TYPE][APP_SECRET] == "top-secret"
        assert json.loads(options["body"]) == {"key": "value"}

    def test_extra_options_override_defaults(self, shop_id_provider: MagicMock) -> None:
        """Extras têm precedência sobre opções padrão."""
        builder = SourceBuilder(shop_id_provider, InAppPurchaseRegistry(), APP_URL)
        factory = RequestOptionsFactory(builder, default_options={"timeout": 5.0})

        defaults = factory.create(_mock_payload(), _app(), Context.create_default())
        overridden = factory.create(
            _mock_payload(),
            _app(),
            Context.create_default(),
            {"timeout": 50},
        )

        assert defaults["timeout"] == 5.0
        assert overridden["timeout"] == 50

    def test_extra_options_cannot_override_owned_keys(
        self,
        factory: RequestOptionsFactory,
    ) -> None:
        """headers, body e contexto de autenticação não são sobrescritos."""
        context = Context.create_default()
        options = factory.create(
            _mock_payload(),
            _app(),
            context,
            {
                "headers": {"X-Custom": "1"},
                "body": "not-json",
                APP_REQUEST_CONTEXT: "other",
                APP_REQUEST_TYPE: {APP_SECRET: "stolen"},
            },
        )

        assert options["headers"] == {"Content-Type": "application/json"}
        assert json.loads(options["body"]) == {"key": "value"}
        assert options[APP_REQUEST_CONTEXT] is context
        assert options[APP_REQUEST_TYPE][APP_SECRET] == "top-secret"

    def test_extra_options_not_mutated(self, factory: RequestOptionsFactory) -> None:
        """O mapa de extras do chamador não é alterado."""
        extra = {"timeout": 50}
        factory.create(_mock_payload(), _app(), Context.create_default(), extra)
        assert extra == {"timeout": 50}

    def test_body_equals_payload_serialization(self, factory: RequestOptionsFactory) -> None:
        """Body é o JSON da serialização do próprio payload."""
        payload = TaxProviderPayload(
            cart=Cart(token="cart-token"),
            context=SalesChannelContext(token="ctx", sales_channel_id="sc-1"),
        )

        options = factory.create(payload, _app(), Context.create_default())

        body = json.loads(options["body"])
        assert body == normalize_struct(payload.json_serialize())
        assert body["source"]["shopId"] == "shop-id"
        assert body["source"]["url"] == APP_URL
        assert body["context"]["salesChannelId"] == "sc-1"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_rejected(self, factory: RequestOptionsFactory, value: float) -> None:
        """NaN/Infinity não geram body: JSON inválido falha antes de retornar."""
        payload = PaymentPayload(
            order_transaction=OrderTransactionEntity(id="tx"),
            order=OrderEntity(id="order"),
            request_data={"score": value},
        )

        with pytest.raises(ValueError, match="JSON compliant"):
            factory.create(payload, _app(), Context.create_default())


class TestMissingSecret:
    """App sem secret falha antes de qualquer trabalho."""

    def test_missing_secret_raises(
        self,
        factory: RequestOptionsFactory,
        shop_id_provider: MagicMock,
    ) -> None:
        """Mensagem exata e payload intocado."""
        payload = _mock_payload()
        message = 'App registration for "TestApp" failed: App secret is missing'

        with pytest.raises(AppRegistrationError, match=re.escape(message)) as exc_info:
            factory.create(payload, _app(secret=None), Context.create_default())

        assert str(exc_info.value) == message
        assert exc_info.value.app_name == "TestApp"
        assert exc_info.value.error_code == "FRAMEWORK__APP_REGISTRATION_FAILED"
        payload.set_source.assert_not_called()
        payload.json_serialize.assert_not_called()
        shop_id_provider.get_shop_id.assert_not_called()

    def test_blank_secret_raises(self, factory: RequestOptionsFactory) -> None:
        """Secret em branco equivale a ausente."""
        with pytest.raises(AppRegistrationError):
            factory.create(_mock_payload(), _app(secret="   "), Context.create_default())

    def test_missing_secret_logged_without_secret(
        self,
        factory: RequestOptionsFactory,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Falha é logada em warning com app_id."""
        with (
            caplog.at_level(logging.WARNING, logger="app.payload.request_options"),
            pytest.raises(AppRegistrationError),
        ):
            factory.create(_mock_payload(), _app(secret=None), Context.create_default())

        records = [r for r in caplog.records if r.getMessage() == "app_secret_missing"]
        assert len(records) == 1
        assert records[0].app_id == "app-id"
