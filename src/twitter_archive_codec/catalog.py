"""Closed catalog of the archive categories this package can transcode.

Each :class:`Category` ties the name used in a file's prefix
(``window.YTD.<name>.part<N> = ``) to the single-key wrapper around its
entries and the record class inside it. Anything outside the catalog is
rejected with :class:`UnsupportedCategory`; the catalog grows by adding
entries, never by parsing unknown shapes loosely.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple, Type

from .errors import MalformedRecord, UnsupportedCategory
from .records import account, ads, devices, direct_messages, personalization, social, tweets
from .records.base import Record, Wrapper
from .transcoding import category_prefix, dumps, expect_array, loads, split_prefix, strip_prefix

GLOBAL_NAME_PATTERN = re.compile(r'YTD\.(?P<category>[a-z0-9_]+)\.part(?P<part>0|[1-9][0-9]*)')


@dataclass(frozen=True)
class Category:
    """One archive file category and how to transcode it."""
    name: str
    wrapper_key: str
    record: Type[Record]
    description: str

    @property
    def data_type(self) -> str:
        """Key of this category in the manifest's ``dataTypes`` table."""
        head, *rest = self.name.split('_')
        return head + ''.join(word.capitalize() for word in rest)

    @property
    def wrapper(self) -> Wrapper:
        return Wrapper(self.wrapper_key, self.record)

    def prefix(self, part: int = 0) -> str:
        return category_prefix(self.name, part)

    def file_name(self, part: int = 0, data_dir: str = "data") -> str:
        """Default archive path: ``data/tweets.js``, ``data/tweets-part1.js``, ..."""
        stem = self.name.replace('_', '-')
        if part:
            return f"{data_dir}/{stem}-part{part}.js"
        return f"{data_dir}/{stem}.js"

    def decode_one(self, json_text: str) -> Record:
        """Decode one wrapper object, e.g. ``{"tweet": {...}}``."""
        return self.wrapper.unwrap(loads(json_text))

    def decode_many(self, json_text: str) -> Tuple[Record, ...]:
        """Decode a JSON array of wrapper objects. One bad entry fails the batch."""
        wrapper = self.wrapper
        records = []
        for index, element in enumerate(expect_array(loads(json_text))):
            try:
                records.append(wrapper.unwrap(element))
            except MalformedRecord as e:
                raise e.prefixed(index)
        return tuple(records)

    def encode_one(self, record: Record, indent: bool = False) -> str:
        return dumps(self.wrapper.wrap(record), indent=indent)

    def encode_many(self, records: Iterable[Record], indent: bool = False) -> str:
        wrapper = self.wrapper
        return dumps([wrapper.wrap(record) for record in records], indent=indent)

    def decode(self, raw_text: str, part: int = 0) -> Tuple[Record, ...]:
        """Decode a complete file, prefix included."""
        return self.decode_many(strip_prefix(raw_text, self.prefix(part)))

    def encode(self, records: Iterable[Record], part: int = 0, indent: bool = False) -> str:
        """Encode records back into a complete file, prefix included."""
        return self.prefix(part) + self.encode_many(records, indent=indent)


def _catalog(*categories: Category) -> Dict[str, Category]:
    return {category.name: category for category in categories}


CATEGORIES: Dict[str, Category] = _catalog(
    Category('account', 'account', account.Account,
             "Account identity: handle, e-mail and creation date"),
    Category('account_timezone', 'accountTimezone', account.AccountTimezone,
             "Time zone selected for the account"),
    Category('ad_engagements', 'ad', ads.AdEngagementBatch,
             "Promoted content the account interacted with"),
    Category('ad_impressions', 'ad', ads.AdImpressionBatch,
             "Promoted content shown to the account"),
    Category('block', 'blocking', social.Follow,
             "Accounts blocked by the account"),
    Category('community_note_rating', 'communityNoteRating', social.CommunityNoteRating,
             "Ratings given to Community Notes"),
    Category('connected_application', 'connectedApplication', devices.ConnectedApplication,
             "Third-party applications authorized on the account"),
    Category('deleted_tweet_headers', 'tweet', tweets.DeletedTweetHeader,
             "Identifiers and timestamps of deleted tweets"),
    Category('device_token', 'deviceToken', devices.DeviceToken,
             "Tokens issued to client applications"),
    Category('direct_message_group_headers', 'dmConversation', direct_messages.GroupConversationHeaders,
             "Metadata of group direct messages"),
    Category('direct_message_headers', 'dmConversation', direct_messages.ConversationHeaders,
             "Metadata of one-to-one direct messages"),
    Category('direct_messages', 'dmConversation', direct_messages.Conversation,
             "One-to-one direct message conversations"),
    Category('direct_messages_group', 'dmConversation', direct_messages.GroupConversation,
             "Group direct message conversations"),
    Category('email_address_change', 'emailAddressChange', account.EmailAddressChange,
             "History of e-mail address changes"),
    Category('follower', 'follower', social.Follow,
             "Accounts following the account"),
    Category('following', 'following', social.Follow,
             "Accounts the account follows"),
    Category('ip_audit', 'ipAudit', devices.IpAudit,
             "Login IP addresses"),
    Category('key_registry', 'registeredDevices', devices.RegisteredDevices,
             "Devices registered for encrypted direct messages"),
    Category('like', 'like', tweets.Like,
             "Tweets liked by the account"),
    Category('lists_member', 'userListInfo', social.ListMembership,
             "Lists the account is a member of"),
    Category('mute', 'muting', social.Follow,
             "Accounts muted by the account"),
    Category('ni_devices', 'niDeviceResponse', devices.NiDevice,
             "Phones registered for SMS notifications"),
    Category('personalization', 'p13nData', personalization.Personalization,
             "Inferred interests, demographics and advertisers"),
    Category('phone_number', 'device', account.PhoneNumber,
             "Phone number attached to the account"),
    Category('profile', 'profile', account.Profile,
             "Profile bio, website, location and avatar"),
    Category('screen_name_change', 'screenNameChange', account.ScreenNameChange,
             "History of handle changes"),
    Category('tweet_headers', 'tweet', tweets.TweetHeader,
             "Identifiers and timestamps of tweets"),
    Category('tweetdeck', 'deck', social.Deck,
             "Saved TweetDeck layouts"),
    Category('tweets', 'tweet', tweets.Tweet,
             "Tweets, replies and retweets posted by the account"),
    Category('twitter_circle', 'twitterCircle', social.TwitterCircle,
             "Twitter Circle owned by the account"),
    Category('verified', 'verified', account.Verified,
             "Verification status of the account"),
)

BY_DATA_TYPE: Dict[str, Category] = {category.data_type: category for category in CATEGORIES.values()}


def is_supported(name: str) -> bool:
    return name in CATEGORIES


def get_category(name: str) -> Category:
    """Look up a category by its prefix name (``direct_messages_group``)."""
    try:
        return CATEGORIES[name]
    except KeyError:
        raise UnsupportedCategory(name) from None


def category_for_data_type(data_type: str) -> Category:
    """Look up a category by its manifest key (``directMessagesGroup``)."""
    try:
        return BY_DATA_TYPE[data_type]
    except KeyError:
        raise UnsupportedCategory(data_type) from None


def parse_global_name(global_name: str) -> Tuple[str, int]:
    """Split ``YTD.tweets.part1`` into ``("tweets", 1)``."""
    match = GLOBAL_NAME_PATTERN.fullmatch(global_name)
    if not match:
        raise MalformedRecord(f"unrecognized global name {global_name!r}")
    return match.group('category'), int(match.group('part'))


def category_for_global_name(global_name: str) -> Tuple[Category, int]:
    name, part = parse_global_name(global_name)
    return get_category(name), part


def decode_file(raw_text: str) -> Tuple[Category, int, Tuple[Record, ...]]:
    """Decode a category file whose category is read from its own prefix."""
    name, part, json_text = split_prefix(raw_text)
    category = get_category(name)
    return category, part, category.decode_many(json_text)
