"""Inferred interests and demographics from ``personalization.js``.

The layout of this file is only partly documented upstream. Every block
below is a closed contract; keys outside it are rejected rather than
guessed at.
"""

from dataclasses import dataclass
from typing import Tuple

from ..primitives import COUNT
from .base import BOOLEAN, TEXT, Field, ListOf, Nested, Quoted, Record


@dataclass(frozen=True)
class LanguageEntry(Record):
    language: str
    is_disabled: bool

    FIELDS = (
        Field('language', 'language', TEXT),
        Field('is_disabled', 'isDisabled', BOOLEAN),
    )


@dataclass(frozen=True)
class GenderInfo(Record):
    gender: str
    gender_override: str

    FIELDS = (
        Field('gender', 'gender', TEXT),
        Field('gender_override', 'genderOverride', TEXT),
    )


@dataclass(frozen=True)
class Demographics(Record):
    languages: Tuple[LanguageEntry, ...]
    gender_info: GenderInfo

    FIELDS = (
        Field('languages', 'languages', ListOf(Nested(LanguageEntry))),
        Field('gender_info', 'genderInfo', Nested(GenderInfo)),
    )


@dataclass(frozen=True)
class Interest(Record):
    name: str
    is_disabled: bool

    FIELDS = (
        Field('name', 'name', TEXT),
        Field('is_disabled', 'isDisabled', BOOLEAN),
    )


@dataclass(frozen=True)
class AudienceAndAdvertisers(Record):
    lookalike_advertisers: Tuple[str, ...]
    advertisers: Tuple[str, ...]
    do_not_reach_advertisers: Tuple[str, ...]
    catalog_audience_advertisers: Tuple[str, ...]
    num_audiences: int

    FIELDS = (
        Field('lookalike_advertisers', 'lookalikeAdvertisers', ListOf(TEXT)),
        Field('advertisers', 'advertisers', ListOf(TEXT)),
        Field('do_not_reach_advertisers', 'doNotReachAdvertisers', ListOf(TEXT)),
        Field('catalog_audience_advertisers', 'catalogAudienceAdvertisers', ListOf(TEXT)),
        Field('num_audiences', 'numAudiences', Quoted(COUNT)),
    )


@dataclass(frozen=True)
class Interests(Record):
    interests: Tuple[Interest, ...]
    partner_interests: Tuple[str, ...]
    audience_and_advertisers: AudienceAndAdvertisers
    shows: Tuple[str, ...]

    FIELDS = (
        Field('interests', 'interests', ListOf(Nested(Interest))),
        Field('partner_interests', 'partnerInterests', ListOf(TEXT)),
        Field('audience_and_advertisers', 'audienceAndAdvertisers', Nested(AudienceAndAdvertisers)),
        Field('shows', 'shows', ListOf(TEXT)),
    )


@dataclass(frozen=True)
class InferredAgeInfo(Record):
    age: Tuple[str, ...]
    birth_date: str

    FIELDS = (
        Field('age', 'age', ListOf(TEXT)),
        Field('birth_date', 'birthDate', TEXT),
    )


@dataclass(frozen=True)
class Personalization(Record):
    demographics: Demographics
    interests: Interests
    location_history: Tuple[str, ...]
    inferred_age_info: InferredAgeInfo

    FIELDS = (
        Field('demographics', 'demographics', Nested(Demographics)),
        Field('interests', 'interests', Nested(Interests)),
        Field('location_history', 'locationHistory', ListOf(TEXT)),
        Field('inferred_age_info', 'inferredAgeInfo', Nested(InferredAgeInfo)),
    )
