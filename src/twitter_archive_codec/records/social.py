"""Relationship records: follows, blocks, mutes, lists, circles, notes, decks."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ..primitives import ID_STRING, ISO_8601
from .base import TEXT, Field, ListOf, Nested, Quoted, Record

ID = Quoted(ID_STRING)


@dataclass(frozen=True)
class Follow(Record):
    """Shared by ``follower``, ``following``, ``block`` and ``mute`` entries."""
    account_id: int
    user_link: str

    FIELDS = (
        Field('account_id', 'accountId', ID),
        Field('user_link', 'userLink', TEXT),
    )


@dataclass(frozen=True)
class ListMembership(Record):
    url: str

    FIELDS = (
        Field('url', 'url', TEXT),
    )


@dataclass(frozen=True)
class TwitterCircle(Record):
    id: int
    owner_user_id: int
    created_at: datetime

    FIELDS = (
        Field('id', 'id', ID),
        Field('owner_user_id', 'ownerUserId', ID),
        Field('created_at', 'createdAt', Quoted(ISO_8601)),
    )


@dataclass(frozen=True)
class CommunityNoteRating(Record):
    not_helpful_tags: Tuple[str, ...]
    note_id: int
    helpfulness_level: str
    created_at: datetime
    user_id: int

    FIELDS = (
        Field('not_helpful_tags', 'notHelpfulTags', ListOf(TEXT)),
        Field('note_id', 'noteId', ID),
        Field('helpfulness_level', 'helpfulnessLevel', TEXT),
        Field('created_at', 'createdAt', Quoted(ISO_8601)),
        Field('user_id', 'userId', ID),
    )


@dataclass(frozen=True)
class DeckColumn(Record):
    pathname: str
    title: Optional[str] = None
    query: Optional[str] = None

    FIELDS = (
        Field('pathname', 'pathname', TEXT),
        Field('title', 'title', TEXT, optional=True),
        Field('query', 'query', TEXT, optional=True),
    )


@dataclass(frozen=True)
class Deck(Record):
    """A saved TweetDeck layout."""
    title: str
    columns: Tuple[DeckColumn, ...]

    FIELDS = (
        Field('title', 'title', TEXT),
        Field('columns', 'columns', ListOf(Nested(DeckColumn))),
    )
