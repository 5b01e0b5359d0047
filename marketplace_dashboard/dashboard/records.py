"""
Record schemas for dashboard display.

These mirror the on-chain entities the dashboard shows: registered agents,
single-agent jobs and multi-step (multihop) jobs.
"""

from enum import IntEnum
from typing import List, Union

from pydantic import BaseModel, Field


class JobState(IntEnum):
    """Job states as stored by the JobsModule contract."""
    OPEN = 0
    ACCEPTED = 1
    COMPLETED = 2
    CANCELLED = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class MultihopJobState(IntEnum):
    """States of a multi-step job."""
    ACTIVE = 0
    COMPLETED = 1

    @property
    def label(self) -> str:
        return self.name.capitalize()


def get_job_state_label(state: Union[int, str, None]) -> str:
    """
    Map a job state value to its label, ``"Unknown"`` if it is not a known state.

    Only integers and decimal digit strings are looked up; booleans, floats
    and other values are unknown.
    """
    if isinstance(state, str) and state.strip().isdecimal():
        state = int(state.strip())
    if isinstance(state, bool) or not isinstance(state, int):
        return "Unknown"
    try:
        return JobState(state).label
    except ValueError:
        return "Unknown"


class AgentMetadata(BaseModel):
    """Off-chain metadata resolved from an agent's token URI."""

    name: str = Field(description="Agent display name")
    description: str = Field(default="", description="What the agent does")


class AgentRecord(BaseModel):
    """An agent registered in the IdentityRegistry."""

    id: str = Field(description="Agent ID")
    owner: str = Field(description="Owner address")
    is_verifier: bool = Field(default=False, description="Whether the agent acts as a verifier")
    token_uri: str = Field(default="", description="Agent token URI")
    metadata: AgentMetadata = Field(description="Resolved agent metadata")
    clients: List[str] = Field(default_factory=list, description="Client addresses served by the agent")
    formatted_id: str = Field(default="", description="ID as shown in the UI")
    formatted_owner: str = Field(default="", description="Shortened owner address")


class JobRecord(BaseModel):
    """A single-agent job from the JobsModule."""

    id: str = Field(description="Job ID")
    description: str = Field(description="Job description")
    state: JobState = Field(default=JobState.OPEN, description="Current job state")
    agent_id: str = Field(description="Assigned agent ID")
    budget: int = Field(ge=0, description="Budget in token base units (wei)")
    creator: str = Field(description="Creator address")
    created_at: int = Field(description="Creation time, unix seconds")

    @property
    def state_label(self) -> str:
        return self.state.label


class MultihopJobRecord(BaseModel):
    """A job composed of several sequential agent steps."""

    id: str = Field(description="Multihop job ID")
    state: MultihopJobState = Field(default=MultihopJobState.ACTIVE, description="Current state")
    creator: str = Field(description="Creator address")
    steps_count: int = Field(ge=0, description="Number of steps (each step is one job)")


class DashboardStats(BaseModel):
    """Aggregate counts shown on the dashboard overview."""

    total_agents: int = 0
    total_jobs: int = 0
    open_jobs: int = 0
    accepted_jobs: int = 0
    completed_jobs: int = 0
    cancelled_jobs: int = 0
    verifier_agents: int = 0
    total_multihop_jobs: int = 0
