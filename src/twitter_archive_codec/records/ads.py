"""Advertising records from ``ad-engagements.js`` and ``ad-impressions.js``.

Both files wrap their payload three levels deep::

    {"ad": {"adsUserData": {"adImpressions": {"impressions": [...]}}}}

Each level is its own record; ``engagements``/``impressions`` properties on
the outer record reach the list directly.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ..primitives import DATE_TIME, ID_STRING
from .base import TEXT, Field, ListOf, Nested, Quoted, Record


@dataclass(frozen=True)
class DeviceInfo(Record):
    os_type: str

    FIELDS = (
        Field('os_type', 'osType', TEXT),
    )


@dataclass(frozen=True)
class PromotedTweetInfo(Record):
    tweet_id: int
    tweet_text: str
    urls: Tuple[str, ...]
    media_urls: Tuple[str, ...]

    FIELDS = (
        Field('tweet_id', 'tweetId', Quoted(ID_STRING)),
        Field('tweet_text', 'tweetText', TEXT),
        Field('urls', 'urls', ListOf(TEXT)),
        Field('media_urls', 'mediaUrls', ListOf(TEXT)),
    )


@dataclass(frozen=True)
class AdvertiserInfo(Record):
    advertiser_name: Optional[str] = None
    screen_name: Optional[str] = None

    FIELDS = (
        Field('advertiser_name', 'advertiserName', TEXT, optional=True),
        Field('screen_name', 'screenName', TEXT, optional=True),
    )


@dataclass(frozen=True)
class TargetingCriteria(Record):
    targeting_type: str
    targeting_value: Optional[str] = None

    FIELDS = (
        Field('targeting_type', 'targetingType', TEXT),
        Field('targeting_value', 'targetingValue', TEXT, optional=True),
    )


@dataclass(frozen=True)
class Impression(Record):
    device_info: DeviceInfo
    display_location: str
    advertiser_info: AdvertiserInfo
    impression_time: datetime
    promoted_tweet_info: Optional[PromotedTweetInfo] = None
    matched_targeting_criteria: Optional[Tuple[TargetingCriteria, ...]] = None

    FIELDS = (
        Field('device_info', 'deviceInfo', Nested(DeviceInfo)),
        Field('display_location', 'displayLocation', TEXT),
        Field('promoted_tweet_info', 'promotedTweetInfo', Nested(PromotedTweetInfo), optional=True),
        Field('advertiser_info', 'advertiserInfo', Nested(AdvertiserInfo)),
        Field('matched_targeting_criteria', 'matchedTargetingCriteria',
              ListOf(Nested(TargetingCriteria)), optional=True),
        Field('impression_time', 'impressionTime', Quoted(DATE_TIME)),
    )


@dataclass(frozen=True)
class EngagementAttribute(Record):
    engagement_time: datetime
    engagement_type: str

    FIELDS = (
        Field('engagement_time', 'engagementTime', Quoted(DATE_TIME)),
        Field('engagement_type', 'engagementType', TEXT),
    )


@dataclass(frozen=True)
class Engagement(Record):
    impression_attributes: Impression
    engagement_attributes: Tuple[EngagementAttribute, ...]

    FIELDS = (
        Field('impression_attributes', 'impressionAttributes', Nested(Impression)),
        Field('engagement_attributes', 'engagementAttributes', ListOf(Nested(EngagementAttribute))),
    )


@dataclass(frozen=True)
class AdEngagements(Record):
    engagements: Tuple[Engagement, ...]

    FIELDS = (
        Field('engagements', 'engagements', ListOf(Nested(Engagement))),
    )


@dataclass(frozen=True)
class EngagementUserData(Record):
    ad_engagements: AdEngagements

    FIELDS = (
        Field('ad_engagements', 'adEngagements', Nested(AdEngagements)),
    )


@dataclass(frozen=True)
class AdEngagementBatch(Record):
    ads_user_data: EngagementUserData

    FIELDS = (
        Field('ads_user_data', 'adsUserData', Nested(EngagementUserData)),
    )

    @property
    def engagements(self) -> Tuple[Engagement, ...]:
        return self.ads_user_data.ad_engagements.engagements


@dataclass(frozen=True)
class AdImpressions(Record):
    impressions: Tuple[Impression, ...]

    FIELDS = (
        Field('impressions', 'impressions', ListOf(Nested(Impression))),
    )


@dataclass(frozen=True)
class ImpressionUserData(Record):
    ad_impressions: AdImpressions

    FIELDS = (
        Field('ad_impressions', 'adImpressions', Nested(AdImpressions)),
    )


@dataclass(frozen=True)
class AdImpressionBatch(Record):
    ads_user_data: ImpressionUserData

    FIELDS = (
        Field('ads_user_data', 'adsUserData', Nested(ImpressionUserData)),
    )

    @property
    def impressions(self) -> Tuple[Impression, ...]:
        return self.ads_user_data.ad_impressions.impressions
