"""
Type definitions

Core Enums shared by the service and the client.
All Enums inherit from str so they serialize as plain strings.
"""

from enum import Enum


class HealthStatus(str, Enum):
    """Health endpoint status"""

    OK = "OK"
    ERROR = "ERROR"


class NotificationKind(str, Enum):
    """Notification shown to the user after a mutation"""

    CONFIRMED = "CONFIRMED"  # the service stored the change
    OFFLINE = "OFFLINE"  # applied to the local cache only
    ERROR = "ERROR"


class LoadSource(str, Enum):
    """Where the client's initial ledger came from"""

    REMOTE = "REMOTE"
    CACHE = "CACHE"
    EMPTY = "EMPTY"
