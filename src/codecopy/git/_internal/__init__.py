"""Internal components for git lookups - not part of public API."""

from codecopy.git._internal.access import RepoAccess

__all__ = ["RepoAccess"]
