"""Chain connection, contract ABIs and display formatting."""

from .blockchain_client import BlockchainClient, CONTRACT_BINDINGS
from .contract_abis import (
    ContractABIs,
    contract_abis,
    get_identity_registry_abi,
    get_jobs_module_abi,
    get_hypt_token_abi
)
from .formatting import format_address, format_balance, format_timestamp, format_units
from .observable import Observable
from .session import (
    ChainConnectionError,
    ConnectResult,
    NetworkMismatchError,
    Session,
    SessionStatus,
    ZERO_ADDRESS
)

__all__ = [
    "BlockchainClient",
    "CONTRACT_BINDINGS",
    "ContractABIs",
    "contract_abis",
    "get_identity_registry_abi",
    "get_jobs_module_abi",
    "get_hypt_token_abi",
    "format_address",
    "format_balance",
    "format_timestamp",
    "format_units",
    "Observable",
    "ChainConnectionError",
    "ConnectResult",
    "NetworkMismatchError",
    "Session",
    "SessionStatus",
    "ZERO_ADDRESS",
]
