"""Tests for configuration defaults and environment overrides."""

import os
import unittest
from unittest.mock import patch

from marketplace_dashboard.config import (
    ContractAddresses,
    DashboardConfig,
    NetworkConfig,
    UpdateIntervals,
)


class TestConfigDefaults(unittest.TestCase):
    """Defaults match the deployed Hedera Testnet setup."""

    def setUp(self):
        patcher = patch.dict(os.environ, {}, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_network_defaults(self):
        network = NetworkConfig(_env_file=None)
        self.assertEqual(network.rpc_url, "https://testnet.hashio.io/api")
        self.assertEqual(network.chain_id, 296)
        self.assertEqual(network.name, "Hedera Testnet")
        self.assertTrue(network.verify_chain_id)

    def test_contract_defaults(self):
        contracts = ContractAddresses(_env_file=None)
        self.assertEqual(contracts.identity_registry, "0x5e3946F4f1c94D7a7d8Ac70Ea8860deD277a8248")
        self.assertEqual(contracts.jobs_module, "0xe54Ec561179e1E210c64A67f021F3Ba7ef9C18D0")
        self.assertEqual(contracts.hypt_token, "0x7744D92137fDA24C3164Bdc9a467a4a25aCf1954")

    def test_update_interval_defaults(self):
        intervals = UpdateIntervals(_env_file=None)
        self.assertEqual(intervals.dashboard, 30000)
        self.assertEqual(intervals.agents, 60000)
        self.assertEqual(intervals.jobs, 15000)

    def test_dashboard_config(self):
        config = DashboardConfig(_env_file=None)
        self.assertTrue(config.is_development())
        self.assertFalse(config.is_production())
        self.assertIsNone(config.abi_dir)


class TestConfigEnvironment(unittest.TestCase):
    """Environment variables override defaults."""

    def test_network_env_prefix(self):
        env = {"NETWORK_RPC_URL": "http://localhost:8545", "NETWORK_CHAIN_ID": "31337"}
        with patch.dict(os.environ, env, clear=True):
            network = NetworkConfig(_env_file=None)
        self.assertEqual(network.rpc_url, "http://localhost:8545")
        self.assertEqual(network.chain_id, 31337)

    def test_contract_env_prefix(self):
        env = {"CONTRACT_JOBS_MODULE": "0x0000000000000000000000000000000000000001"}
        with patch.dict(os.environ, env, clear=True):
            contracts = ContractAddresses(_env_file=None)
        self.assertEqual(contracts.jobs_module, "0x0000000000000000000000000000000000000001")

    def test_production_environment(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "Production"}, clear=True):
            config = DashboardConfig(_env_file=None)
        self.assertTrue(config.is_production())

    def test_display_logs_summary(self):
        config = DashboardConfig(_env_file=None)
        with self.assertLogs("marketplace_dashboard.config", level="INFO") as logs:
            config.display()
        self.assertTrue(any("IdentityRegistry" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
