"""Direct message conversations and their header-only variants.

One-to-one conversations only contain ``messageCreate`` events. Group
conversations mix several event kinds, each stored as a single-key object
whose key names the event::

    {"participantsLeave": {"userIds": ["1234"], "createdAt": "..."}}
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple, Union

from ..primitives import ID_STRING, ISO_8601
from .base import TEXT, Field, ListOf, Nested, Quoted, Record, Variant, Wrapper

ID = Quoted(ID_STRING)
CREATED_AT = Quoted(ISO_8601)


@dataclass(frozen=True)
class Reaction(Record):
    sender_id: int
    reaction_key: str
    event_id: int
    created_at: datetime

    FIELDS = (
        Field('sender_id', 'senderId', ID),
        Field('reaction_key', 'reactionKey', TEXT),
        Field('event_id', 'eventId', ID),
        Field('created_at', 'createdAt', CREATED_AT),
    )


@dataclass(frozen=True)
class MessageUrl(Record):
    url: str
    expanded: str
    display: str

    FIELDS = (
        Field('url', 'url', TEXT),
        Field('expanded', 'expanded', TEXT),
        Field('display', 'display', TEXT),
    )


@dataclass(frozen=True)
class DirectMessage(Record):
    recipient_id: int
    reactions: Tuple[Reaction, ...]
    urls: Tuple[MessageUrl, ...]
    text: str
    media_urls: Tuple[str, ...]
    sender_id: int
    id: int
    created_at: datetime

    FIELDS = (
        Field('recipient_id', 'recipientId', ID),
        Field('reactions', 'reactions', ListOf(Nested(Reaction))),
        Field('urls', 'urls', ListOf(Nested(MessageUrl))),
        Field('text', 'text', TEXT),
        Field('media_urls', 'mediaUrls', ListOf(TEXT)),
        Field('sender_id', 'senderId', ID),
        Field('id', 'id', ID),
        Field('created_at', 'createdAt', CREATED_AT),
    )


@dataclass(frozen=True)
class GroupMessage(Record):
    reactions: Tuple[Reaction, ...]
    urls: Tuple[MessageUrl, ...]
    text: str
    media_urls: Tuple[str, ...]
    sender_id: int
    id: int
    created_at: datetime

    FIELDS = (
        Field('reactions', 'reactions', ListOf(Nested(Reaction))),
        Field('urls', 'urls', ListOf(Nested(MessageUrl))),
        Field('text', 'text', TEXT),
        Field('media_urls', 'mediaUrls', ListOf(TEXT)),
        Field('sender_id', 'senderId', ID),
        Field('id', 'id', ID),
        Field('created_at', 'createdAt', CREATED_AT),
    )


@dataclass(frozen=True)
class ParticipantsLeave(Record):
    user_ids: Tuple[int, ...]
    created_at: datetime

    FIELDS = (
        Field('user_ids', 'userIds', ListOf(ID)),
        Field('created_at', 'createdAt', CREATED_AT),
    )


@dataclass(frozen=True)
class ParticipantsJoin(Record):
    initiating_user_id: int
    user_ids: Tuple[int, ...]
    created_at: datetime

    FIELDS = (
        Field('initiating_user_id', 'initiatingUserId', ID),
        Field('user_ids', 'userIds', ListOf(ID)),
        Field('created_at', 'createdAt', CREATED_AT),
    )


@dataclass(frozen=True)
class JoinConversation(Record):
    initiating_user_id: int
    participants_snapshot: Tuple[int, ...]
    created_at: datetime

    FIELDS = (
        Field('initiating_user_id', 'initiatingUserId', ID),
        Field('participants_snapshot', 'participantsSnapshot', ListOf(ID)),
        Field('created_at', 'createdAt', CREATED_AT),
    )


@dataclass(frozen=True)
class ConversationNameUpdate(Record):
    initiating_user_id: int
    name: str
    created_at: datetime

    FIELDS = (
        Field('initiating_user_id', 'initiatingUserId', ID),
        Field('name', 'name', TEXT),
        Field('created_at', 'createdAt', CREATED_AT),
    )


GroupEvent = Union[GroupMessage, ParticipantsLeave, ParticipantsJoin,
                   JoinConversation, ConversationNameUpdate]

MEMBERSHIP_EVENTS = (
    Wrapper('participantsLeave', ParticipantsLeave),
    Wrapper('participantsJoin', ParticipantsJoin),
    Wrapper('joinConversation', JoinConversation),
    Wrapper('conversationNameUpdate', ConversationNameUpdate),
)


@dataclass(frozen=True)
class Conversation(Record):
    """One-to-one conversation; ``conversation_id`` looks like ``"111-222"``."""
    conversation_id: str
    messages: Tuple[DirectMessage, ...]

    FIELDS = (
        Field('conversation_id', 'conversationId', TEXT),
        Field('messages', 'messages', ListOf(Wrapper('messageCreate', DirectMessage))),
    )


@dataclass(frozen=True)
class GroupConversation(Record):
    conversation_id: str
    messages: Tuple[GroupEvent, ...]

    FIELDS = (
        Field('conversation_id', 'conversationId', TEXT),
        Field('messages', 'messages', ListOf(
            Variant(Wrapper('messageCreate', GroupMessage), *MEMBERSHIP_EVENTS))),
    )


@dataclass(frozen=True)
class MessageHeader(Record):
    id: int
    sender_id: int
    recipient_id: int
    created_at: datetime

    FIELDS = (
        Field('id', 'id', ID),
        Field('sender_id', 'senderId', ID),
        Field('recipient_id', 'recipientId', ID),
        Field('created_at', 'createdAt', CREATED_AT),
    )


@dataclass(frozen=True)
class GroupMessageHeader(Record):
    id: int
    sender_id: int
    created_at: datetime

    FIELDS = (
        Field('id', 'id', ID),
        Field('sender_id', 'senderId', ID),
        Field('created_at', 'createdAt', CREATED_AT),
    )


@dataclass(frozen=True)
class ConversationHeaders(Record):
    conversation_id: str
    messages: Tuple[MessageHeader, ...]

    FIELDS = (
        Field('conversation_id', 'conversationId', TEXT),
        Field('messages', 'messages', ListOf(Wrapper('messageCreate', MessageHeader))),
    )


@dataclass(frozen=True)
class GroupConversationHeaders(Record):
    conversation_id: str
    messages: Tuple[Record, ...]

    FIELDS = (
        Field('conversation_id', 'conversationId', TEXT),
        Field('messages', 'messages', ListOf(
            Variant(Wrapper('messageCreate', GroupMessageHeader), *MEMBERSHIP_EVENTS))),
    )
