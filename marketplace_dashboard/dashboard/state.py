"""Dashboard state: the records, derived statistics and refresh bookkeeping a view renders."""

import logging
import time
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union

from ..infrastructure.formatting import format_timestamp
from ..infrastructure.observable import Observable
from .fixtures import sample_agents, sample_jobs, sample_multihop_jobs
from .records import (
    AgentRecord,
    DashboardStats,
    JobRecord,
    JobState,
    MultihopJobRecord,
    get_job_state_label,
)

logger = logging.getLogger(__name__)


class DashboardState(Observable):
    """
    Explicitly owned dashboard state.

    Construct one per view (or per test) instead of sharing a module-level
    singleton. Records default to the sample fixtures. Subscribers are told
    about reassignments of ``agents``, ``jobs``, ``multihop_jobs``,
    ``recent_activity``, ``is_loading`` and ``last_update``.
    """

    observed_fields = ("agents", "jobs", "multihop_jobs", "recent_activity", "is_loading", "last_update")

    def __init__(
        self,
        agents: Optional[List[AgentRecord]] = None,
        jobs: Optional[List[JobRecord]] = None,
        multihop_jobs: Optional[List[MultihopJobRecord]] = None,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__()
        self._clock = clock
        self.agents = sample_agents() if agents is None else list(agents)
        self.jobs = sample_jobs(clock()) if jobs is None else list(jobs)
        self.multihop_jobs = sample_multihop_jobs() if multihop_jobs is None else list(multihop_jobs)
        self.recent_activity: List[Dict[str, Any]] = []
        self.is_loading = False
        self.last_update = datetime.fromtimestamp(clock())
        self._periodic_updates = False

    def jobs_by_state(self, state: Union[JobState, int]) -> List[JobRecord]:
        return [job for job in self.jobs if job.state == state]

    def jobs_for_agent(self, agent_id: str) -> List[JobRecord]:
        return [job for job in self.jobs if job.agent_id == str(agent_id)]

    @property
    def stats(self) -> DashboardStats:
        """Counts recomputed from the current records on every access."""
        return DashboardStats(
            total_agents=len(self.agents),
            # every multihop step is a job of its own
            total_jobs=len(self.jobs) + sum(mh.steps_count for mh in self.multihop_jobs),
            open_jobs=len(self.jobs_by_state(JobState.OPEN)),
            accepted_jobs=len(self.jobs_by_state(JobState.ACCEPTED)),
            completed_jobs=len(self.jobs_by_state(JobState.COMPLETED)),
            cancelled_jobs=len(self.jobs_by_state(JobState.CANCELLED)),
            verifier_agents=sum(1 for agent in self.agents if agent.is_verifier),
            total_multihop_jobs=len(self.multihop_jobs),
        )

    async def fetch_agents(self):
        """Agents come from fixtures; nothing to fetch yet."""

    async def fetch_jobs(self):
        """Jobs come from fixtures; nothing to fetch yet."""

    async def fetch_multihop_jobs(self):
        """Multihop jobs come from fixtures; nothing to fetch yet."""

    async def fetch_all_data(self):
        """Refresh every record set and stamp ``last_update``."""
        try:
            self.is_loading = True
            await self.fetch_agents()
            await self.fetch_jobs()
            await self.fetch_multihop_jobs()
            self.last_update = datetime.fromtimestamp(self._clock())
            logger.debug(f"Dashboard data refreshed at {self.last_update.isoformat()}")
        except Exception as e:
            logger.error(f"Failed to fetch dashboard data: {e}")
            raise
        finally:
            self.is_loading = False

    async def refresh(self):
        await self.fetch_all_data()

    def start_periodic_updates(self):
        # Fixture data never changes, so there is no timer to start.
        self._periodic_updates = True

    def stop_periodic_updates(self):
        self._periodic_updates = False

    @property
    def periodic_updates_enabled(self) -> bool:
        return self._periodic_updates

    @staticmethod
    def get_job_state_label(state: Union[int, str, None]) -> str:
        return get_job_state_label(state)

    @staticmethod
    def format_timestamp(timestamp: Optional[Any]) -> str:
        return format_timestamp(timestamp)
