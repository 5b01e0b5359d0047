"""Read-only blockchain client that owns the dashboard's chain session."""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Set, Tuple

import aiohttp
from eth_utils import to_checksum_address
from web3 import AsyncWeb3

from ..config import config, ContractAddresses, NetworkConfig
from .contract_abis import ContractABIs, contract_abis
from .formatting import format_address, format_balance
from .observable import Observable
from .session import (
    ChainConnectionError,
    ConnectResult,
    NetworkMismatchError,
    Session,
    SessionStatus,
)

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_ERROR = "Failed to connect to the network"

# logical binding name -> (ABI name, ContractAddresses field)
CONTRACT_BINDINGS: Dict[str, Tuple[str, str]] = {
    "identity_registry": ("IdentityRegistry", "identity_registry"),
    "jobs_module": ("JobsModule", "jobs_module"),
    "hypt_token": ("HyptToken", "hypt_token"),
}


class BlockchainClient(Observable):
    """
    Read-only session manager for a single EVM network.

    connect() asks the configured RPC endpoint for its chain id once and then
    binds IdentityRegistry, JobsModule and HyptToken to one shared transport.
    Nothing is ever signed: the exposed account is the zero address.

    The current state lives in ``session``, which is replaced (never mutated)
    on every transition. Subscribers receive ``("session", Session)``.
    """

    observed_fields = ("session",)

    def __init__(
        self,
        network_config: Optional[NetworkConfig] = None,
        contract_addresses: Optional[ContractAddresses] = None,
        abis: Optional[ContractABIs] = None,
    ):
        super().__init__()
        self.network = network_config or config.network
        self.addresses = contract_addresses or config.contracts
        self.abis = abis or contract_abis
        self.session = Session.disconnected(self.network.rpc_url, self.network.chain_id)
        # transports dropped outside an event loop, closed by aclose()
        self._unclosed: List[AsyncWeb3] = []
        self._closing: Set[asyncio.Task] = set()

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def status(self) -> SessionStatus:
        return self.session.status

    @property
    def provider(self) -> Optional[AsyncWeb3]:
        return self.session.transport

    @property
    def contracts(self) -> Dict[str, Any]:
        return self.session.bindings

    @property
    def account(self) -> str:
        return self.session.placeholder_account

    @property
    def error(self) -> Optional[str]:
        return self.session.last_error

    @property
    def is_connected(self) -> bool:
        return self.session.status == SessionStatus.CONNECTED

    @property
    def is_connecting(self) -> bool:
        return self.session.status == SessionStatus.CONNECTING

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def connect(self) -> ConnectResult:
        """
        Open a read-only connection and bind the configured contracts.

        Any previous transport and bindings are dropped first and the old
        transport is closed. Failures are never raised: they are stored in
        ``session.last_error`` and returned as a failed ConnectResult. There
        is no retry.
        """
        previous = self.session.transport
        self.session = self.session.connecting()
        if previous is not None:
            await self._close_transport(previous)
        logger.info(f"Connecting to {self.network.name} at {self.network.rpc_url}")

        transport = None
        try:
            transport = self._build_transport()
            chain_id = await transport.eth.chain_id
            self._verify_network(chain_id)
            bindings = self._bind_contracts(transport)
        except Exception as e:
            error = e if isinstance(e, ChainConnectionError) else ChainConnectionError(str(e) or DEFAULT_CONNECT_ERROR)
            if error is not e:
                error.__cause__ = e
            message = str(error) or DEFAULT_CONNECT_ERROR
            logger.error(f"Connection error: {message}")
            self.session = self.session.failed(message)
            if transport is not None:
                await self._close_transport(transport)
            return ConnectResult.failure(error)

        self.session = self.session.connected(transport, bindings, chain_id)
        logger.info(f"✅ Connected to {self.network.name} - Chain ID: {chain_id}")
        return ConnectResult.success()

    def disconnect(self):
        """
        Drop the transport and bindings. Safe to call in any state.

        Inside a running event loop the dropped transport's HTTP session is
        closed in a background task; otherwise it is kept until aclose().
        """
        transport = self._reset_session()
        if transport is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, transport will be closed by aclose()")
            self._unclosed.append(transport)
            return
        task = loop.create_task(self._close_transport(transport))
        self._closing.add(task)
        task.add_done_callback(self._closing.discard)

    async def aclose(self):
        """Disconnect and close every transport this client still holds open."""
        transport = self._reset_session()
        pending, self._unclosed = self._unclosed, []
        if transport is not None:
            pending.append(transport)
        for stale in pending:
            await self._close_transport(stale)
        if self._closing:
            await asyncio.gather(*self._closing)

    def _reset_session(self) -> Optional[AsyncWeb3]:
        transport = self.session.transport
        if self.session.status != SessionStatus.DISCONNECTED:
            logger.info(f"Disconnected from {self.network.name}")
        self.session = Session.disconnected(self.network.rpc_url, self.network.chain_id)
        return transport

    async def _close_transport(self, transport: AsyncWeb3):
        try:
            await transport.provider.disconnect()
        except Exception as e:
            logger.warning(f"Failed to close transport for {self.network.rpc_url}: {e}")

    async def switch_network(self) -> ConnectResult:
        """Always succeeds; a read-only session never switches the wallet network."""
        return ConnectResult.success()

    def setup_event_listeners(self):
        """Read-only sessions do not subscribe to chain events."""

    def _build_transport(self) -> AsyncWeb3:
        timeout = aiohttp.ClientTimeout(total=self.network.request_timeout)
        return AsyncWeb3(
            AsyncWeb3.AsyncHTTPProvider(self.network.rpc_url, request_kwargs={"timeout": timeout})
        )

    def _verify_network(self, chain_id: int):
        if self.network.verify_chain_id and chain_id != self.network.chain_id:
            raise NetworkMismatchError(self.network.chain_id, chain_id)

    def _bind_contracts(self, transport: AsyncWeb3) -> Dict[str, Any]:
        bindings = {}
        for binding_name, (abi_name, address_field) in CONTRACT_BINDINGS.items():
            address = to_checksum_address(getattr(self.addresses, address_field))
            bindings[binding_name] = transport.eth.contract(
                address=address,
                abi=self.abis.get_abi(abi_name)
            )
            logger.debug(f"Bound {abi_name} at {address}")
        return bindings

    # ------------------------------------------------------------------
    # Contract access
    # ------------------------------------------------------------------

    def get_contract(self, name: str) -> Any:
        """Return the bound contract for a logical name (e.g. ``"jobs_module"``)."""
        if not self.is_connected:
            raise RuntimeError("Blockchain client not connected")
        if name not in self.session.bindings:
            raise ValueError(f"Contract {name} not bound. Available: {list(self.session.bindings)}")
        return self.session.bindings[name]

    async def call(self, contract_name: str, method_name: str, *args) -> Any:
        """Call a read-only contract method."""
        contract = self.get_contract(contract_name)
        method = getattr(contract.functions, method_name)
        return await method(*args).call()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    @staticmethod
    def format_address(address: Any) -> str:
        return format_address(address)

    @staticmethod
    def format_balance(balance: Any, decimals: int = 18) -> str:
        return format_balance(balance, decimals)
