"""Convenience exports for ORM models."""
from .call_session import CallCandidate, CallSession
from .follow import Follow
from .friend_request import FriendRequestEntry, FriendRequestStatus
from .group import Group, GroupMember, GroupMessage
from .message import DirectMessage
from .notification import Notification
from .profile import Profile

__all__ = [
    "CallCandidate",
    "CallSession",
    "DirectMessage",
    "Follow",
    "FriendRequestEntry",
    "FriendRequestStatus",
    "Group",
    "GroupMember",
    "GroupMessage",
    "Notification",
    "Profile",
]
