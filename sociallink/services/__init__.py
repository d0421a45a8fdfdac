"""Convenience exports for service layer."""
from .call_service import (
    add_ice_candidate,
    build_call_id,
    end_call,
    get_call_answer,
    get_call_offer,
    get_ice_candidates,
    list_incoming_calls,
    store_call_answer,
    store_call_offer,
)
from .event_stream import event_stream_manager, publish_event
from .follow_service import FollowStats, follow_user, get_follow_stats, list_followers, list_following, unfollow_user
from .friendship_service import (
    get_request_status,
    list_friends,
    list_outgoing_requests,
    list_pending_requests,
    respond_to_request,
    send_friend_request,
)
from .group_service import (
    add_group_member,
    create_group,
    delete_group,
    get_group,
    list_group_messages,
    list_my_groups,
    remove_group_member,
    send_group_message,
)
from .identity_service import Principal, create_access_token, decode_access_token, get_current_principal
from .message_service import (
    ConversationDigest,
    count_unread_messages,
    get_conversation,
    list_conversation_partners,
    mark_conversation_read,
    send_message,
    summarize_conversations,
)
from .notification_service import (
    NotificationType,
    add_notification,
    count_unread_notifications,
    list_notifications,
    mark_all_read,
    mark_notification_read,
)
from .profile_service import get_profile, load_profiles, resolve_display_name, save_profile

__all__ = [
    "add_ice_candidate",
    "build_call_id",
    "end_call",
    "get_call_answer",
    "get_call_offer",
    "get_ice_candidates",
    "list_incoming_calls",
    "store_call_answer",
    "store_call_offer",
    "event_stream_manager",
    "publish_event",
    "FollowStats",
    "follow_user",
    "get_follow_stats",
    "list_followers",
    "list_following",
    "unfollow_user",
    "get_request_status",
    "list_friends",
    "list_outgoing_requests",
    "list_pending_requests",
    "respond_to_request",
    "send_friend_request",
    "add_group_member",
    "create_group",
    "delete_group",
    "get_group",
    "list_group_messages",
    "list_my_groups",
    "remove_group_member",
    "send_group_message",
    "Principal",
    "create_access_token",
    "decode_access_token",
    "get_current_principal",
    "ConversationDigest",
    "count_unread_messages",
    "get_conversation",
    "list_conversation_partners",
    "mark_conversation_read",
    "send_message",
    "summarize_conversations",
    "NotificationType",
    "add_notification",
    "count_unread_notifications",
    "list_notifications",
    "mark_all_read",
    "mark_notification_read",
    "get_profile",
    "load_profiles",
    "resolve_display_name",
    "save_profile",
]
