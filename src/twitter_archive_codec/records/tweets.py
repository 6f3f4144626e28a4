"""Records for ``data/tweets.js``, ``data/like.js`` and the tweet header files."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ..primitives import COUNT, CREATED_AT, ID_STRING, ISO_8601
from .base import BOOLEAN, TEXT, Field, Indices, ListOf, Nested, Quoted, Record

ID = Quoted(ID_STRING)
NUMBER = Quoted(COUNT)
TEXT_RANGE = Indices(COUNT)


@dataclass(frozen=True)
class EditControlInitial(Record):
    """Edit window of a tweet that can still be edited."""
    edit_tweet_ids: Tuple[int, ...]
    editable_until: datetime
    edits_remaining: int
    is_edit_eligible: bool

    FIELDS = (
        Field('edit_tweet_ids', 'editTweetIds', ListOf(ID)),
        Field('editable_until', 'editableUntil', Quoted(ISO_8601)),
        Field('edits_remaining', 'editsRemaining', NUMBER),
        Field('is_edit_eligible', 'isEditEligible', BOOLEAN),
    )


@dataclass(frozen=True)
class EditControlEdit(Record):
    """Edit metadata of a tweet that replaced an earlier version."""
    initial_tweet_id: int
    edit_control_initial: Optional[EditControlInitial] = None

    FIELDS = (
        Field('initial_tweet_id', 'initialTweetId', ID),
        Field('edit_control_initial', 'editControlInitial', Nested(EditControlInitial), optional=True),
    )


@dataclass(frozen=True)
class EditInfo(Record):
    initial: Optional[EditControlInitial] = None
    edit: Optional[EditControlEdit] = None

    FIELDS = (
        Field('initial', 'initial', Nested(EditControlInitial), optional=True),
        Field('edit', 'edit', Nested(EditControlEdit), optional=True),
    )


@dataclass(frozen=True)
class TextEntity(Record):
    """A hashtag or cashtag symbol."""
    text: str
    indices: Tuple[int, int]

    FIELDS = (
        Field('text', 'text', TEXT),
        Field('indices', 'indices', TEXT_RANGE),
    )


@dataclass(frozen=True)
class UserMention(Record):
    name: str
    screen_name: str
    indices: Tuple[int, int]
    id: int
    legacy_id: Optional[int] = None

    FIELDS = (
        Field('name', 'name', TEXT),
        Field('screen_name', 'screen_name', TEXT),
        Field('indices', 'indices', TEXT_RANGE),
        Field('id', 'id_str', ID),
        Field('legacy_id', 'id', ID, optional=True),
    )


@dataclass(frozen=True)
class Url(Record):
    url: str
    expanded_url: str
    display_url: str
    indices: Tuple[int, int]

    FIELDS = (
        Field('url', 'url', TEXT),
        Field('expanded_url', 'expanded_url', TEXT),
        Field('display_url', 'display_url', TEXT),
        Field('indices', 'indices', TEXT_RANGE),
    )


@dataclass(frozen=True)
class MediaSize(Record):
    width: int
    height: int
    resize: str

    FIELDS = (
        Field('width', 'w', NUMBER),
        Field('height', 'h', NUMBER),
        Field('resize', 'resize', TEXT),
    )


@dataclass(frozen=True)
class MediaSizes(Record):
    medium: MediaSize
    thumb: MediaSize
    small: MediaSize
    large: MediaSize

    FIELDS = (
        Field('medium', 'medium', Nested(MediaSize)),
        Field('thumb', 'thumb', Nested(MediaSize)),
        Field('small', 'small', Nested(MediaSize)),
        Field('large', 'large', Nested(MediaSize)),
    )


@dataclass(frozen=True)
class VideoVariant(Record):
    content_type: str
    url: str
    bitrate: Optional[int] = None

    FIELDS = (
        Field('bitrate', 'bitrate', NUMBER, optional=True),
        Field('content_type', 'content_type', TEXT),
        Field('url', 'url', TEXT),
    )


@dataclass(frozen=True)
class VideoInfo(Record):
    aspect_ratio: Tuple[int, ...]
    variants: Tuple[VideoVariant, ...]
    duration_millis: Optional[int] = None

    FIELDS = (
        Field('aspect_ratio', 'aspect_ratio', ListOf(NUMBER)),
        Field('duration_millis', 'duration_millis', NUMBER, optional=True),
        Field('variants', 'variants', ListOf(Nested(VideoVariant))),
    )


@dataclass(frozen=True)
class Media(Record):
    """Photo, video or animated GIF attached to a tweet."""
    expanded_url: str
    indices: Tuple[int, int]
    url: str
    media_url: str
    id: int
    media_url_https: str
    sizes: MediaSizes
    type: str
    display_url: str
    legacy_id: Optional[int] = None
    source_status_id: Optional[int] = None
    legacy_source_status_id: Optional[int] = None
    source_user_id: Optional[int] = None
    legacy_source_user_id: Optional[int] = None
    video_info: Optional[VideoInfo] = None

    FIELDS = (
        Field('expanded_url', 'expanded_url', TEXT),
        Field('legacy_source_status_id', 'source_status_id', ID, optional=True),
        Field('indices', 'indices', TEXT_RANGE),
        Field('url', 'url', TEXT),
        Field('media_url', 'media_url', TEXT),
        Field('id', 'id_str', ID),
        Field('legacy_source_user_id', 'source_user_id', ID, optional=True),
        Field('video_info', 'video_info', Nested(VideoInfo), optional=True),
        Field('legacy_id', 'id', ID, optional=True),
        Field('media_url_https', 'media_url_https', TEXT),
        Field('source_user_id', 'source_user_id_str', ID, optional=True),
        Field('sizes', 'sizes', Nested(MediaSizes)),
        Field('type', 'type', TEXT),
        Field('source_status_id', 'source_status_id_str', ID, optional=True),
        Field('display_url', 'display_url', TEXT),
    )


@dataclass(frozen=True)
class Entities(Record):
    hashtags: Tuple[TextEntity, ...]
    symbols: Tuple[TextEntity, ...]
    user_mentions: Tuple[UserMention, ...]
    urls: Tuple[Url, ...]
    media: Optional[Tuple[Media, ...]] = None

    FIELDS = (
        Field('hashtags', 'hashtags', ListOf(Nested(TextEntity))),
        Field('symbols', 'symbols', ListOf(Nested(TextEntity))),
        Field('media', 'media', ListOf(Nested(Media)), optional=True),
        Field('user_mentions', 'user_mentions', ListOf(Nested(UserMention))),
        Field('urls', 'urls', ListOf(Nested(Url))),
    )


@dataclass(frozen=True)
class ExtendedEntities(Record):
    media: Tuple[Media, ...]

    FIELDS = (
        Field('media', 'media', ListOf(Nested(Media))),
    )


@dataclass(frozen=True)
class Withheld(Record):
    """Geo-restriction marker. Its keys sit directly on the tweet object."""
    copyright: Optional[bool] = None
    in_countries: Optional[Tuple[str, ...]] = None
    scope: Optional[str] = None

    FIELDS = (
        Field('copyright', 'withheld_copyright', BOOLEAN, optional=True),
        Field('in_countries', 'withheld_in_countries', ListOf(TEXT), optional=True),
        Field('scope', 'withheld_scope', TEXT, optional=True),
    )


@dataclass(frozen=True)
class Tweet(Record):
    """One entry of ``tweets.js``.

    The archive repeats several identifiers in both a ``*_str`` key and a
    bare key. The ``*_str`` form maps to the plain semantic name; the bare
    form is kept as ``legacy_*`` so that both survive a round trip.
    """
    id: int
    created_at: datetime
    full_text: str
    edit_info: Optional[EditInfo] = None
    retweeted: Optional[bool] = None
    source: Optional[str] = None
    entities: Optional[Entities] = None
    display_text_range: Optional[Tuple[int, int]] = None
    favorite_count: Optional[int] = None
    in_reply_to_status_id: Optional[int] = None
    legacy_in_reply_to_user_id: Optional[int] = None
    truncated: Optional[bool] = None
    retweet_count: Optional[int] = None
    legacy_id: Optional[int] = None
    legacy_in_reply_to_status_id: Optional[int] = None
    possibly_sensitive: Optional[bool] = None
    favorited: Optional[bool] = None
    lang: Optional[str] = None
    in_reply_to_screen_name: Optional[str] = None
    in_reply_to_user_id: Optional[int] = None
    extended_entities: Optional[ExtendedEntities] = None
    withheld: Optional[Withheld] = None

    FIELDS = (
        Field('edit_info', 'edit_info', Nested(EditInfo), optional=True),
        Field('retweeted', 'retweeted', BOOLEAN, optional=True),
        Field('source', 'source', TEXT, optional=True),
        Field('entities', 'entities', Nested(Entities), optional=True),
        Field('display_text_range', 'display_text_range', TEXT_RANGE, optional=True),
        Field('favorite_count', 'favorite_count', NUMBER, optional=True),
        Field('in_reply_to_status_id', 'in_reply_to_status_id_str', ID, optional=True),
        Field('id', 'id_str', ID),
        Field('legacy_in_reply_to_user_id', 'in_reply_to_user_id', ID, optional=True),
        Field('truncated', 'truncated', BOOLEAN, optional=True),
        Field('retweet_count', 'retweet_count', NUMBER, optional=True),
        Field('legacy_id', 'id', ID, optional=True),
        Field('legacy_in_reply_to_status_id', 'in_reply_to_status_id', ID, optional=True),
        Field('possibly_sensitive', 'possibly_sensitive', BOOLEAN, optional=True),
        Field('created_at', 'created_at', Quoted(CREATED_AT)),
        Field('favorited', 'favorited', BOOLEAN, optional=True),
        Field('full_text', 'full_text', TEXT),
        Field('lang', 'lang', TEXT, optional=True),
        Field('in_reply_to_screen_name', 'in_reply_to_screen_name', TEXT, optional=True),
        Field('in_reply_to_user_id', 'in_reply_to_user_id_str', ID, optional=True),
        Field('extended_entities', 'extended_entities', Nested(ExtendedEntities), optional=True),
        Field('withheld', 'withheld', Nested(Withheld), optional=True, flatten=True),
    )

    @property
    def is_reply(self) -> bool:
        return self.in_reply_to_status_id is not None


@dataclass(frozen=True)
class TweetHeader(Record):
    tweet_id: int
    user_id: int
    created_at: datetime

    FIELDS = (
        Field('tweet_id', 'tweet_id', ID),
        Field('user_id', 'user_id', ID),
        Field('created_at', 'created_at', Quoted(CREATED_AT)),
    )


@dataclass(frozen=True)
class DeletedTweetHeader(Record):
    tweet_id: int
    user_id: int
    created_at: datetime
    deleted_at: datetime

    FIELDS = (
        Field('tweet_id', 'tweet_id', ID),
        Field('user_id', 'user_id', ID),
        Field('created_at', 'created_at', Quoted(CREATED_AT)),
        Field('deleted_at', 'deleted_at', Quoted(CREATED_AT)),
    )


@dataclass(frozen=True)
class Like(Record):
    tweet_id: int
    expanded_url: str
    full_text: Optional[str] = None

    FIELDS = (
        Field('tweet_id', 'tweetId', ID),
        Field('full_text', 'fullText', TEXT, optional=True),
        Field('expanded_url', 'expandedUrl', TEXT),
    )
