"""Convenience exports for schema layer."""
from .calls import (
    CallAnswerRequest,
    CallAnswerResponse,
    CallOfferRequest,
    CallOfferResponse,
    IceCandidateListResponse,
    IceCandidateRequest,
    IncomingCallResponse,
)
from .follow import FollowActionResponse, FollowListResponse, FollowStatsResponse
from .friends import (
    FriendListResponse,
    FriendRequestRespondPayload,
    FriendRequestResponse,
    FriendRequestStatusResponse,
    OutgoingFriendRequest,
    PendingFriendRequest,
)
from .groups import GroupCreate, GroupMessageCreate, GroupMessageResponse, GroupResponse
from .messages import (
    ConversationResponse,
    ConversationSummary,
    DirectMessageResponse,
    MarkReadResponse,
    MessageSendRequest,
    UnreadCountResponse,
)
from .notifications import NotificationListResponse, NotificationResponse, NotificationSummaryResponse
from .profiles import ProfileResponse, ProfileUpdateRequest

__all__ = [
    "CallAnswerRequest",
    "CallAnswerResponse",
    "CallOfferRequest",
    "CallOfferResponse",
    "IceCandidateListResponse",
    "IceCandidateRequest",
    "IncomingCallResponse",
    "FollowActionResponse",
    "FollowListResponse",
    "FollowStatsResponse",
    "FriendListResponse",
    "FriendRequestRespondPayload",
    "FriendRequestResponse",
    "FriendRequestStatusResponse",
    "OutgoingFriendRequest",
    "PendingFriendRequest",
    "GroupCreate",
    "GroupMessageCreate",
    "GroupMessageResponse",
    "GroupResponse",
    "ConversationResponse",
    "ConversationSummary",
    "DirectMessageResponse",
    "MarkReadResponse",
    "MessageSendRequest",
    "UnreadCountResponse",
    "NotificationListResponse",
    "NotificationResponse",
    "NotificationSummaryResponse",
    "ProfileResponse",
    "ProfileUpdateRequest",
]
