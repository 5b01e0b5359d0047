"""
Tests for DashboardState.

Prerequisites:
- None (sample fixtures only, no chain access)

Run with: pytest marketplace_dashboard/tests/test_dashboard_state.py
"""

import unittest
import asyncio
from datetime import datetime
from unittest.mock import AsyncMock, patch

from marketplace_dashboard.dashboard import (
    AgentMetadata,
    AgentRecord,
    DashboardState,
    JobRecord,
    JobState,
    MultihopJobRecord,
    get_job_state_label,
    sample_agents,
    sample_jobs,
)

NOW = 1_700_000_000.0
OWNER = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"


def run_async(coro):
    """Helper to run async functions in sync tests."""
    return asyncio.run(coro)


class FakeClock:
    def __init__(self, start=NOW):
        self.now = start

    def __call__(self):
        return self.now


class TestSampleFixtures(unittest.TestCase):

    def test_sample_agents(self):
        agents = sample_agents()
        self.assertEqual([a.id for a in agents], ["1", "2", "3", "4", "5"])
        self.assertEqual(agents[1].metadata.name, "Security Audit Agent")
        self.assertTrue(all(a.formatted_owner == "0x742d...f44e" for a in agents))
        self.assertEqual(len(agents[4].clients), 3)

    def test_sample_jobs_relative_to_now(self):
        jobs = sample_jobs(NOW)
        self.assertEqual(jobs[0].created_at, int(NOW) - 3600)
        self.assertEqual(jobs[2].created_at, int(NOW) - 86400)
        self.assertEqual(jobs[1].budget, 500 * 10 ** 18)
        self.assertEqual(jobs[2].state, JobState.COMPLETED)

    def test_fixtures_are_fresh_copies(self):
        first = sample_agents()
        first[0].metadata.name = "Changed"
        self.assertEqual(sample_agents()[0].metadata.name, "Data Analyst Agent")


class TestDashboardStats(unittest.TestCase):

    def test_default_stats(self):
        stats = DashboardState(clock=FakeClock()).stats

        self.assertEqual(stats.total_agents, 5)
        # 5 jobs plus 3 + 5 multihop steps
        self.assertEqual(stats.total_jobs, 13)
        self.assertEqual(stats.open_jobs, 2)
        self.assertEqual(stats.accepted_jobs, 2)
        self.assertEqual(stats.completed_jobs, 1)
        self.assertEqual(stats.cancelled_jobs, 0)
        self.assertEqual(stats.verifier_agents, 2)
        self.assertEqual(stats.total_multihop_jobs, 2)

    def test_stats_follow_reassigned_records(self):
        state = DashboardState(clock=FakeClock())
        state.jobs = [
            JobRecord(id="9", description="Cancelled job", state=JobState.CANCELLED,
                      agent_id="1", budget=0, creator=OWNER, created_at=int(NOW)),
        ]
        state.multihop_jobs = []

        stats = state.stats
        self.assertEqual(stats.total_jobs, 1)
        self.assertEqual(stats.cancelled_jobs, 1)
        self.assertEqual(stats.open_jobs, 0)

    def test_empty_state(self):
        state = DashboardState(agents=[], jobs=[], multihop_jobs=[], clock=FakeClock())
        stats = state.stats
        self.assertEqual(stats.total_agents, 0)
        self.assertEqual(stats.total_jobs, 0)
        self.assertEqual(stats.verifier_agents, 0)

    def test_custom_records(self):
        agent = AgentRecord(id="7", owner=OWNER, is_verifier=True,
                            metadata=AgentMetadata(name="Verifier"))
        multihop = MultihopJobRecord(id="1", creator=OWNER, steps_count=4)
        state = DashboardState(agents=[agent], jobs=[], multihop_jobs=[multihop], clock=FakeClock())

        self.assertEqual(state.stats.verifier_agents, 1)
        self.assertEqual(state.stats.total_jobs, 4)


class TestFiltering(unittest.TestCase):

    def test_jobs_by_state(self):
        state = DashboardState(clock=FakeClock())
        self.assertEqual([j.id for j in state.jobs_by_state(JobState.OPEN)], ["1", "4"])
        self.assertEqual([j.id for j in state.jobs_by_state(1)], ["2", "5"])

    def test_jobs_for_agent(self):
        state = DashboardState(clock=FakeClock())
        self.assertEqual([j.id for j in state.jobs_for_agent("1")], ["1", "4"])
        self.assertEqual([j.id for j in state.jobs_for_agent(4)], ["5"])
        self.assertEqual(state.jobs_for_agent("5"), [])


class TestOwnership(unittest.TestCase):
    """Each DashboardState owns its records."""

    def test_instances_do_not_share_records(self):
        first = DashboardState(clock=FakeClock())
        second = DashboardState(clock=FakeClock())

        first.agents = first.agents[:1]
        self.assertEqual(len(second.agents), 5)
        self.assertIsNot(first.jobs, second.jobs)

    def test_passed_lists_are_copied(self):
        agents = sample_agents()
        state = DashboardState(agents=agents, clock=FakeClock())
        agents.clear()
        self.assertEqual(len(state.agents), 5)


class TestRefresh(unittest.TestCase):

    def test_fetch_all_data_updates_timestamp(self):
        clock = FakeClock()
        state = DashboardState(clock=clock)
        self.assertEqual(state.last_update, datetime.fromtimestamp(NOW))

        clock.now = NOW + 60
        run_async(state.fetch_all_data())

        self.assertEqual(state.last_update, datetime.fromtimestamp(NOW + 60))
        self.assertFalse(state.is_loading)

    def test_refresh_notifies_loading_transitions(self):
        clock = FakeClock()
        state = DashboardState(clock=clock)
        seen = []
        state.subscribe(lambda field, value: seen.append((field, value)))

        clock.now = NOW + 5
        run_async(state.refresh())

        self.assertEqual(seen, [
            ("is_loading", True),
            ("last_update", datetime.fromtimestamp(NOW + 5)),
            ("is_loading", False),
        ])

    def test_fetch_failure_clears_loading_and_raises(self):
        state = DashboardState(clock=FakeClock())

        with patch.object(state, "fetch_jobs", AsyncMock(side_effect=RuntimeError("rpc down"))):
            with self.assertRaises(RuntimeError):
                run_async(state.fetch_all_data())

        self.assertFalse(state.is_loading)
        self.assertEqual(state.last_update, datetime.fromtimestamp(NOW))

    def test_periodic_update_toggles(self):
        state = DashboardState(clock=FakeClock())
        self.assertFalse(state.periodic_updates_enabled)
        state.start_periodic_updates()
        self.assertTrue(state.periodic_updates_enabled)
        state.stop_periodic_updates()
        self.assertFalse(state.periodic_updates_enabled)


class TestDisplayHelpers(unittest.TestCase):

    def test_job_state_labels(self):
        self.assertEqual(get_job_state_label(0), "Open")
        self.assertEqual(get_job_state_label(1), "Accepted")
        self.assertEqual(get_job_state_label("2"), "Completed")
        self.assertEqual(get_job_state_label(JobState.CANCELLED), "Cancelled")
        self.assertEqual(get_job_state_label(9), "Unknown")
        self.assertEqual(get_job_state_label(None), "Unknown")
        self.assertEqual(DashboardState.get_job_state_label(3), "Cancelled")

    def test_job_state_label_rejects_non_integer_keys(self):
        self.assertEqual(get_job_state_label(True), "Unknown")
        self.assertEqual(get_job_state_label(False), "Unknown")
        self.assertEqual(get_job_state_label(1.7), "Unknown")
        self.assertEqual(get_job_state_label(2.0), "Unknown")
        self.assertEqual(get_job_state_label("abc"), "Unknown")
        self.assertEqual(get_job_state_label("1.5"), "Unknown")
        self.assertEqual(get_job_state_label("\u00b2"), "Unknown")
        self.assertEqual(get_job_state_label(" 2 "), "Completed")

    def test_job_record_label(self):
        self.assertEqual(sample_jobs(NOW)[1].state_label, "Accepted")

    def test_format_timestamp(self):
        self.assertEqual(DashboardState.format_timestamp(None), "N/A")
        self.assertEqual(
            DashboardState.format_timestamp(NOW),
            datetime.fromtimestamp(NOW).strftime('%Y-%m-%d %H:%M:%S')
        )


if __name__ == "__main__":
    unittest.main()
