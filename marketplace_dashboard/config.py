"""Configuration management for the marketplace dashboard."""

import logging
from typing import Optional
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# The .env file lives next to the package directory
PROJECT_DIR = Path(__file__).parent.parent
ENV_FILE_PATH = PROJECT_DIR / ".env"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


class NetworkConfig(BaseSettings):
    """Read-only network connection configuration."""

    model_config = SettingsConfigDict(env_prefix="NETWORK_", env_file=str(ENV_FILE_PATH), extra="ignore")

    rpc_url: str = Field(default="https://testnet.hashio.io/api", description="RPC gateway URL")
    chain_id: int = Field(default=296, description="Expected chain ID (296 for Hedera Testnet)")
    name: str = Field(default="Hedera Testnet", description="Human readable network name")
    verify_chain_id: bool = Field(
        default=True,
        description="Fail connect() when the endpoint reports a different chain ID"
    )
    request_timeout: float = Field(default=30.0, description="Per-request transport timeout in seconds")


class ContractAddresses(BaseSettings):
    """Deployed contract addresses."""

    model_config = SettingsConfigDict(env_prefix="CONTRACT_", env_file=str(ENV_FILE_PATH), extra="ignore")

    identity_registry: str = Field(
        default="0x5e3946F4f1c94D7a7d8Ac70Ea8860deD277a8248",
        description="IdentityRegistry address"
    )
    jobs_module: str = Field(
        default="0xe54Ec561179e1E210c64A67f021F3Ba7ef9C18D0",
        description="JobsModule address"
    )
    hypt_token: str = Field(
        default="0x7744D92137fDA24C3164Bdc9a467a4a25aCf1954",
        description="HyptToken address"
    )


class UpdateIntervals(BaseSettings):
    """Refresh intervals (milliseconds) used by dashboard views."""

    model_config = SettingsConfigDict(env_prefix="UPDATE_INTERVAL_", env_file=str(ENV_FILE_PATH), extra="ignore")

    dashboard: int = Field(default=30000, description="Dashboard refresh interval")
    agents: int = Field(default=60000, description="Agent list refresh interval")
    jobs: int = Field(default=15000, description="Job list refresh interval")


class DashboardConfig(BaseSettings):
    """Main configuration class for the dashboard."""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    contracts: ContractAddresses = Field(default_factory=ContractAddresses)
    update_intervals: UpdateIntervals = Field(default_factory=UpdateIntervals)

    # Optional directory holding <ContractName>.json ABI files
    abi_dir: Optional[str] = Field(default=None, description="Directory with contract ABI JSON files")

    # Environment
    environment: str = Field(default="development", description="Environment (development, production)")
    debug: bool = Field(default=True, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        """Create configuration from environment variables."""
        return cls()

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    def display(self):
        """Log the current configuration."""
        logger.info("Configuration:")
        logger.info(f"  Network: {self.network.name} (chain {self.network.chain_id})")
        logger.info(f"  RPC URL: {self.network.rpc_url}")
        logger.info(f"  Verify chain ID: {self.network.verify_chain_id}")
        logger.info(f"  IdentityRegistry: {self.contracts.identity_registry}")
        logger.info(f"  JobsModule: {self.contracts.jobs_module}")
        logger.info(f"  HyptToken: {self.contracts.hypt_token}")
        logger.info(f"  ABI dir: {self.abi_dir or '✗ Not set (built-in ABIs)'}")
        logger.info(f"  Environment: {self.environment}")
        logger.info(f"  Debug: {self.debug}")


def configure_logging(level: Optional[str] = None):
    """Configure root logging with the project-wide format."""
    logging.basicConfig(
        level=getattr(logging, (level or config.log_level).upper(), logging.INFO),
        format=LOG_FORMAT
    )


# Global configuration instance
config = DashboardConfig.from_env()
