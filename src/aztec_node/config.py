"""Credentials and runtime settings for the Aztec node.

Values are read from ``AZTEC_*`` environment variables or a ``.env`` file,
and may also be passed explicitly::

    settings = AztecSettings(network="custom", rpc_endpoint="http://localhost:8080")
"""

from typing import Optional

from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from aztec_node.exceptions import ConfigurationError
from aztec_node.models.schemas import AccountType, Network

NETWORK_ENDPOINTS = {
    Network.MAINNET: "https://aztec-mainnet.example.com",
    Network.TESTNET: "https://aztec-testnet.example.com",
}


class AztecSettings(BaseSettings):
    """Connection and credential settings (the node's credential record)."""

    model_config = SettingsConfigDict(
        env_prefix="AZTEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    network: Network = Field(default=Network.TESTNET, description="Network to connect to")
    rpc_endpoint: str = Field(default="http://localhost:8080", description="RPC URL for the custom network")
    account_type: AccountType = Field(default=AccountType.SPENDING, description="Type of account access")
    spending_key: SecretStr = Field(default=SecretStr(""), description="Private spending key")
    viewing_key: SecretStr = Field(default=SecretStr(""), description="Viewing key for note decryption")
    account_address: str = Field(default="", description="Aztec account address")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    page_size: int = Field(default=100, gt=0, description="Page size for paginated listings")

    def get_endpoint(self) -> str:
        """
        Resolve the API base URL.

        Returns:
            str: Custom endpoint with a single trailing slash removed, or the
            fixed URL of the selected network
        """
        if self.network == Network.CUSTOM and self.rpc_endpoint:
            endpoint = self.rpc_endpoint
            return endpoint[:-1] if endpoint.endswith("/") else endpoint
        return NETWORK_ENDPOINTS.get(self.network, NETWORK_ENDPOINTS[Network.TESTNET])

    def key_type_header(self) -> Optional[str]:
        """Value of the X-Aztec-Key-Type header, if the matching key is set."""
        if self.account_type == AccountType.SPENDING and self.spending_key.get_secret_value():
            return AccountType.SPENDING.value
        if self.account_type == AccountType.VIEWING and self.viewing_key.get_secret_value():
            return AccountType.VIEWING.value
        return None


# Global settings instance
_settings: Optional[AztecSettings] = None


def get_settings() -> AztecSettings:
    """
    Get or create the global settings instance.

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    global _settings
    if _settings is None:
        try:
            _settings = AztecSettings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Aztec settings: {e}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
