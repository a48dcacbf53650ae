"""Tests for settings and endpoint resolution."""

import pytest
from pydantic import ValidationError

from aztec_node.config import NETWORK_ENDPOINTS, AztecSettings, get_settings, reset_settings
from aztec_node.exceptions import ConfigurationError
from aztec_node.models.schemas import AccountType, Network


def make_settings(**kwargs):
    return AztecSettings(_env_file=None, **kwargs)


class TestEndpointResolution:

    def test_default_is_testnet(self):
        settings = make_settings()
        assert settings.network == Network.TESTNET
        assert settings.get_endpoint() == NETWORK_ENDPOINTS[Network.TESTNET]

    def test_mainnet(self):
        assert make_settings(network="mainnet").get_endpoint() == NETWORK_ENDPOINTS[Network.MAINNET]

    def test_custom_strips_one_trailing_slash(self):
        settings = make_settings(network="custom", rpc_endpoint="http://localhost:8080/")
        assert settings.get_endpoint() == "http://localhost:8080"

    def test_custom_without_slash(self):
        settings = make_settings(network="custom", rpc_endpoint="http://node.local")
        assert settings.get_endpoint() == "http://node.local"

    def test_unknown_network_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(network="devnet")


class TestKeyTypeHeader:

    def test_spending(self):
        settings = make_settings(spending_key="0x01")
        assert settings.key_type_header() == "spending"

    def test_viewing(self):
        settings = make_settings(account_type="viewing", viewing_key="0x02")
        assert settings.key_type_header() == "viewing"

    def test_missing_key(self):
        assert make_settings(account_type=AccountType.VIEWING).key_type_header() is None

    def test_secret_not_in_repr(self):
        settings = make_settings(spending_key="0xdeadbeef")
        assert "deadbeef" not in repr(settings)


class TestEnvironment:

    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("AZTEC_NETWORK", "custom")
        monkeypatch.setenv("AZTEC_RPC_ENDPOINT", "http://env.local/")
        monkeypatch.setenv("AZTEC_TIMEOUT", "5")
        settings = make_settings()
        assert settings.get_endpoint() == "http://env.local"
        assert settings.timeout == 5.0

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

    def test_reset_settings(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("AZTEC_ACCOUNT_ADDRESS", "0xabc")
        reset_settings()
        second = get_settings()
        assert second is not first
        assert second.account_address == "0xabc"

    def test_invalid_environment(self, monkeypatch):
        monkeypatch.setenv("AZTEC_NETWORK", "devnet")
        with pytest.raises(ConfigurationError):
            get_settings()

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            make_settings(timeout=0)
