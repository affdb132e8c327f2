"""Strongly typed identifiers for domain entities.

Platform IDs are opaque strings handed out to tenants; user IDs are UUIDs.
"""

from typing import NewType
from uuid import UUID

PlatformId = NewType("PlatformId", str)
UserId = NewType("UserId", UUID)
