"""
Contract ABI loader for the marketplace dashboard.

ABIs are read from ``<abi_dir>/<ContractName>.json`` when an ABI directory is
configured. Each file may hold either a bare ABI array or a compiler artifact
with an ``abi`` key. Contracts without a file fall back to the built-in
read-only ABIs below, which cover every view method the dashboard reads.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Any, Optional, Union

from ..config import config

logger = logging.getLogger(__name__)

ABIEntry = Dict[str, Any]


def _view(name: str, inputs: List[ABIEntry], outputs: List[ABIEntry]) -> ABIEntry:
    return {
        "type": "function",
        "name": name,
        "inputs": inputs,
        "outputs": outputs,
        "stateMutability": "view",
    }


def _arg(name: str, type_: str, **extra) -> ABIEntry:
    entry = {"name": name, "type": type_}
    entry.update(extra)
    return entry


IDENTITY_REGISTRY_ABI: List[ABIEntry] = [
    _view("totalAgents", [], [_arg("", "uint256")]),
    _view("ownerOf", [_arg("agentId", "uint256")], [_arg("", "address")]),
    _view("tokenURI", [_arg("agentId", "uint256")], [_arg("", "string")]),
    _view("isVerifier", [_arg("agentId", "uint256")], [_arg("", "bool")]),
    _view("getClients", [_arg("agentId", "uint256")], [_arg("", "address[]")]),
    {
        "type": "event",
        "name": "Registered",
        "anonymous": False,
        "inputs": [
            _arg("agentId", "uint256", indexed=True),
            _arg("tokenURI", "string", indexed=False),
            _arg("owner", "address", indexed=True),
        ],
    },
]

JOBS_MODULE_ABI: List[ABIEntry] = [
    _view("jobCount", [], [_arg("", "uint256")]),
    _view(
        "getJob",
        [_arg("jobId", "uint256")],
        [
            _arg("description", "string"),
            _arg("state", "uint8"),
            _arg("agentId", "uint256"),
            _arg("budget", "uint256"),
            _arg("creator", "address"),
            _arg("createdAt", "uint256"),
        ],
    ),
    _view("multihopJobCount", [], [_arg("", "uint256")]),
    _view(
        "getMultihopJob",
        [_arg("multihopJobId", "uint256")],
        [
            _arg("state", "uint8"),
            _arg("creator", "address"),
            _arg("stepsCount", "uint256"),
        ],
    ),
    {
        "type": "event",
        "name": "JobCreated",
        "anonymous": False,
        "inputs": [
            _arg("jobId", "uint256", indexed=True),
            _arg("agentId", "uint256", indexed=True),
            _arg("creator", "address", indexed=True),
            _arg("budget", "uint256", indexed=False),
        ],
    },
    {
        "type": "event",
        "name": "JobStateChanged",
        "anonymous": False,
        "inputs": [
            _arg("jobId", "uint256", indexed=True),
            _arg("state", "uint8", indexed=False),
        ],
    },
]

HYPT_TOKEN_ABI: List[ABIEntry] = [
    _view("name", [], [_arg("", "string")]),
    _view("symbol", [], [_arg("", "string")]),
    _view("decimals", [], [_arg("", "uint8")]),
    _view("totalSupply", [], [_arg("", "uint256")]),
    _view("balanceOf", [_arg("account", "address")], [_arg("", "uint256")]),
    _view(
        "allowance",
        [_arg("owner", "address"), _arg("spender", "address")],
        [_arg("", "uint256")],
    ),
    {
        "type": "event",
        "name": "Transfer",
        "anonymous": False,
        "inputs": [
            _arg("from", "address", indexed=True),
            _arg("to", "address", indexed=True),
            _arg("value", "uint256", indexed=False),
        ],
    },
]

BUILTIN_ABIS: Dict[str, List[ABIEntry]] = {
    "IdentityRegistry": IDENTITY_REGISTRY_ABI,
    "JobsModule": JOBS_MODULE_ABI,
    "HyptToken": HYPT_TOKEN_ABI,
}


class ContractABIs:
    """
    Utility class to load and manage contract ABIs.

    Artifacts found in ``abi_dir`` take precedence over the built-in ABIs.
    """

    def __init__(self, abi_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the contract ABI loader.

        Args:
            abi_dir: Optional directory containing <ContractName>.json files
        """
        self.abi_dir = Path(abi_dir) if abi_dir else None
        self._abis: Dict[str, List[ABIEntry]] = {}
        self._loaded = False

    def _load_contract_artifact(self, contract_name: str) -> Optional[List[ABIEntry]]:
        """
        Load a contract ABI from the ABI directory.

        Args:
            contract_name: Name of the contract (e.g., "JobsModule")

        Returns:
            The ABI list, or None if no usable artifact exists
        """
        if self.abi_dir is None:
            return None

        artifact_path = self.abi_dir / f"{contract_name}.json"
        if not artifact_path.exists():
            logger.debug(f"No ABI artifact at {artifact_path}, using built-in ABI")
            return None

        try:
            with open(artifact_path, 'r') as f:
                artifact = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading ABI artifact for {contract_name}: {e}")
            return None

        abi = artifact.get('abi') if isinstance(artifact, dict) else artifact
        if not isinstance(abi, list):
            logger.error(f"ABI artifact for {contract_name} has no ABI array: {artifact_path}")
            return None

        logger.info(f"Loaded ABI for {contract_name} from {artifact_path} ({len(abi)} entries)")
        return abi

    def load_all(self) -> bool:
        """
        Load ABIs for every known contract.

        Returns:
            True once every contract has an ABI (artifact or built-in)
        """
        if self._loaded:
            return True

        for contract_name, builtin_abi in BUILTIN_ABIS.items():
            self._abis[contract_name] = self._load_contract_artifact(contract_name) or builtin_abi

        self._loaded = True
        logger.debug(f"Contract ABIs ready: {sorted(self._abis)}")
        return True

    def get_abi(self, contract_name: str) -> List[ABIEntry]:
        """
        Get the ABI for a specific contract.

        Raises:
            ValueError: If the contract is unknown
        """
        if not self._loaded:
            self.load_all()

        if contract_name not in self._abis:
            raise ValueError(f"ABI for {contract_name} not found. Available: {list(self._abis.keys())}")

        return self._abis[contract_name]

    def list_functions(self, contract_name: str) -> List[str]:
        """List all function names in a contract."""
        abi = self.get_abi(contract_name)
        return [entry['name'] for entry in abi if entry.get('type') == 'function']

    def list_events(self, contract_name: str) -> List[str]:
        """List all event names in a contract."""
        abi = self.get_abi(contract_name)
        return [entry['name'] for entry in abi if entry.get('type') == 'event']


# Global instance for easy access
contract_abis = ContractABIs(config.abi_dir)


def get_identity_registry_abi() -> List[ABIEntry]:
    """Get the IdentityRegistry contract ABI."""
    return contract_abis.get_abi("IdentityRegistry")


def get_jobs_module_abi() -> List[ABIEntry]:
    """Get the JobsModule contract ABI."""
    return contract_abis.get_abi("JobsModule")


def get_hypt_token_abi() -> List[ABIEntry]:
    """Get the HyptToken contract ABI."""
    return contract_abis.get_abi("HyptToken")
