"""Remote configuration sources."""

from remote.base import RemoteSync
from remote.firebase import FirebaseRemoteSync
from remote.static import StaticRemoteSync

__all__ = [
    "FirebaseRemoteSync",
    "RemoteSync",
    "StaticRemoteSync",
]
