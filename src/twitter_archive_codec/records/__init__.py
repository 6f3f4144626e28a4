"""Typed record definitions for every supported archive file."""
from .base import Field, Record, Wrapper, Variant
from .account import (
    Account, AccountTimezone, EmailAddressChange, PhoneNumber, Profile,
    ScreenNameChange, Verified,
)
from .ads import AdEngagementBatch, AdImpressionBatch, Engagement, Impression
from .devices import ConnectedApplication, DeviceToken, IpAudit, NiDevice, RegisteredDevices
from .direct_messages import (
    Conversation, ConversationHeaders, DirectMessage, GroupConversation,
    GroupConversationHeaders, GroupMessage,
)
from .personalization import Personalization
from .social import CommunityNoteRating, Deck, Follow, ListMembership, TwitterCircle
from .tweets import DeletedTweetHeader, Like, Tweet, TweetHeader

__all__ = [
    'Field',
    'Record',
    'Wrapper',
    'Variant',
    'Account',
    'AccountTimezone',
    'EmailAddressChange',
    'PhoneNumber',
    'Profile',
    'ScreenNameChange',
    'Verified',
    'AdEngagementBatch',
    'AdImpressionBatch',
    'Engagement',
    'Impression',
    'ConnectedApplication',
    'DeviceToken',
    'IpAudit',
    'NiDevice',
    'RegisteredDevices',
    'Conversation',
    'ConversationHeaders',
    'DirectMessage',
    'GroupConversation',
    'GroupConversationHeaders',
    'GroupMessage',
    'Personalization',
    'CommunityNoteRating',
    'Deck',
    'Follow',
    'ListMembership',
    'TwitterCircle',
    'DeletedTweetHeader',
    'Like',
    'Tweet',
    'TweetHeader',
]
