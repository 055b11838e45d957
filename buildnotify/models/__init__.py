"""Data models - Dataclass definitions for builds, causes and intents."""

from .build import (
    BuildOutcome,
    BuildRecord,
    Cause,
    ChangeSetEntry,
    ManualCause,
    Project,
    SCMTriggerCause,
    TestSummary,
    UpstreamCause,
)
from .intent import IntentKind, NotificationIntent

__all__ = [
    'BuildOutcome',
    'BuildRecord',
    'Cause',
    'ChangeSetEntry',
    'ManualCause',
    'Project',
    'SCMTriggerCause',
    'TestSummary',
    'UpstreamCause',
    'IntentKind',
    'NotificationIntent',
]
