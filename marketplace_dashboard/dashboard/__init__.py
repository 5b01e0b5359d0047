"""Dashboard state and the record shapes it displays."""

from .records import (
    AgentMetadata,
    AgentRecord,
    DashboardStats,
    JobRecord,
    JobState,
    MultihopJobRecord,
    MultihopJobState,
    get_job_state_label
)
from .fixtures import sample_agents, sample_jobs, sample_multihop_jobs
from .state import DashboardState

__all__ = [
    "AgentMetadata",
    "AgentRecord",
    "DashboardStats",
    "JobRecord",
    "JobState",
    "MultihopJobRecord",
    "MultihopJobState",
    "get_job_state_label",
    "sample_agents",
    "sample_jobs",
    "sample_multihop_jobs",
    "DashboardState",
]
