from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=3000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")

    # Service Metadata
    service_name: str = Field(default="bridge-route-pinger", description="Service name")
    service_version: str = Field(default="1.0.0", description="Service version")
    service_description: str = Field(
        default="List viable bridge routes and live fee/time quotes for cross-chain token transfers",
        description="Human-readable service description",
    )

    # Upstream Providers
    lifi_base_url: str = Field(default="https://li.quest/v1", description="LI.FI API base URL")
    socket_base_url: str = Field(default="https://api.socket.tech/v2", description="Socket API base URL")
    socket_api_key: str = Field(
        default="",
        description="Socket API key",
        validation_alias=AliasChoices("socket_api_key", "SOCKET_API_KEY", "BUNGEE_API_KEY"),
    )
    provider_timeout_seconds: float = Field(default=8.0, gt=0, description="Per-provider request timeout")
    quote_user_address: str = Field(
        default="0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045",
        description="Address quoted as sender; upstreams require a valid EOA",
    )
    lifi_slippage: float = Field(default=0.01, ge=0, description="LI.FI slippage as a fraction")
    socket_swap_slippage: float = Field(default=1, ge=0, description="Socket default swap slippage in percent")

    # Cache Settings
    cache_ttl_seconds: int = Field(default=30, ge=1, description="Route cache TTL in seconds")

    # Payment Gate
    payment_required: bool = Field(default=True, description="Require x402 payment headers on route requests")
    payment_amount: float = Field(default=0.02, ge=0, description="Minimum payment per request")
    payment_currency: str = Field(default="USDC", description="Payment currency")
    payment_network: str = Field(default="base", description="Network payments settle on")
    pay_to_wallet: str = Field(
        default="0x992920386E3D950BC260f99C81FDA12419eD4594",
        description="Wallet that receives payments",
    )
    facilitator_url: str = Field(
        default="https://facilitator.daydreams.systems",
        description="x402 facilitator URL advertised in the manifest",
    )

    @property
    def has_socket_key(self) -> bool:
        return bool(self.socket_api_key)


# Global settings instance
settings = Settings()
