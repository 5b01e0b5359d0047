"""
Marketplace Dashboard

Read-only backend for the agent marketplace dashboard.

Structure:
- infrastructure/: Read-only chain session (client, ABIs, formatting)
- dashboard/: Dashboard state, record schemas and sample data
- config.py: Shared configuration
"""

__version__ = "0.1.0"

from .config import config, configure_logging
from .infrastructure import (
    BlockchainClient,
    ChainConnectionError,
    ConnectResult,
    NetworkMismatchError,
    Session,
    SessionStatus,
    format_address,
    format_balance
)
from .dashboard import DashboardState, JobState

__all__ = [
    "config",
    "configure_logging",
    "BlockchainClient",
    "ChainConnectionError",
    "ConnectResult",
    "NetworkMismatchError",
    "Session",
    "SessionStatus",
    "format_address",
    "format_balance",
    "DashboardState",
    "JobState",
    "__version__"
]
