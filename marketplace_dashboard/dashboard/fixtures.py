"""Sample marketplace records used until live contract reads are wired in."""

import time
from typing import List, Optional

from ..infrastructure.formatting import format_address
from .records import (
    AgentMetadata,
    AgentRecord,
    JobRecord,
    JobState,
    MultihopJobRecord,
    MultihopJobState,
)

SAMPLE_OWNER = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"

HYPT = 10 ** 18

_AGENTS = [
    ("1", False, "Data Analyst Agent", "Specialized in data processing and analysis tasks",
     ["0x1234567890123456789012345678901234567890", "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd"]),
    ("2", True, "Security Audit Agent", "Expert in smart contract security and auditing",
     ["0x1234567890123456789012345678901234567890"]),
    ("3", False, "AI Training Agent", "Handles machine learning model training and optimization",
     ["0xabcdefabcdefabcdefabcdefabcdefabcdefabcd", "0x1111111111111111111111111111111111111111"]),
    ("4", True, "DeFi Strategy Agent", "Optimizes yield farming and DeFi investment strategies",
     ["0x2222222222222222222222222222222222222222"]),
    ("5", False, "Blockchain Monitor Agent", "Monitors blockchain transactions and network activity",
     ["0x3333333333333333333333333333333333333333", "0x4444444444444444444444444444444444444444",
      "0x5555555555555555555555555555555555555555"]),
]

# (id, description, state, agent id, budget in HYPT, age in seconds)
_JOBS = [
    ("1", "Data analysis task for customer insights", JobState.OPEN, "1", 100, 3600),
    ("2", "Smart contract audit and security review", JobState.ACCEPTED, "2", 500, 7200),
    ("3", "AI model training for image recognition", JobState.COMPLETED, "3", 200, 86400),
    ("4", "Blockchain transaction monitoring service", JobState.OPEN, "1", 75, 1800),
    ("5", "DeFi yield optimization strategy", JobState.ACCEPTED, "4", 300, 10800),
]


def sample_agents() -> List[AgentRecord]:
    return [
        AgentRecord(
            id=agent_id,
            owner=SAMPLE_OWNER,
            is_verifier=is_verifier,
            token_uri="",
            metadata=AgentMetadata(name=name, description=description),
            clients=list(clients),
            formatted_id=agent_id,
            formatted_owner=format_address(SAMPLE_OWNER),
        )
        for agent_id, is_verifier, name, description, clients in _AGENTS
    ]


def sample_jobs(now: Optional[float] = None) -> List[JobRecord]:
    """Sample jobs with creation times relative to ``now`` (defaults to the current time)."""
    now = int(time.time() if now is None else now)
    return [
        JobRecord(
            id=job_id,
            description=description,
            state=state,
            agent_id=agent_id,
            budget=budget * HYPT,
            creator=SAMPLE_OWNER,
            created_at=now - age,
        )
        for job_id, description, state, agent_id, budget, age in _JOBS
    ]


def sample_multihop_jobs() -> List[MultihopJobRecord]:
    return [
        MultihopJobRecord(id="1", state=MultihopJobState.ACTIVE, creator=SAMPLE_OWNER, steps_count=3),
        MultihopJobRecord(id="2", state=MultihopJobState.COMPLETED, creator=SAMPLE_OWNER, steps_count=5),
    ]
