"""Account-level records: account, profile and their change histories."""

from dataclasses import dataclass
from datetime import datetime

from ..primitives import ID_STRING, ISO_8601
from .base import BOOLEAN, TEXT, Field, Nested, Quoted, Record

ID = Quoted(ID_STRING)


@dataclass(frozen=True)
class Account(Record):
    email: str
    created_via: str
    username: str
    account_id: int
    created_at: datetime
    account_display_name: str

    FIELDS = (
        Field('email', 'email', TEXT),
        Field('created_via', 'createdVia', TEXT),
        Field('username', 'username', TEXT),
        Field('account_id', 'accountId', ID),
        Field('created_at', 'createdAt', Quoted(ISO_8601)),
        Field('account_display_name', 'accountDisplayName', TEXT),
    )


@dataclass(frozen=True)
class AccountTimezone(Record):
    account_id: int
    time_zone: str

    FIELDS = (
        Field('account_id', 'accountId', ID),
        Field('time_zone', 'timeZone', TEXT),
    )


@dataclass(frozen=True)
class ProfileDescription(Record):
    bio: str
    website: str
    location: str

    FIELDS = (
        Field('bio', 'bio', TEXT),
        Field('website', 'website', TEXT),
        Field('location', 'location', TEXT),
    )


@dataclass(frozen=True)
class Profile(Record):
    description: ProfileDescription
    avatar_media_url: str

    FIELDS = (
        Field('description', 'description', Nested(ProfileDescription)),
        Field('avatar_media_url', 'avatarMediaUrl', TEXT),
    )


@dataclass(frozen=True)
class ScreenNameChangeDetail(Record):
    changed_at: datetime
    changed_from: str
    changed_to: str

    FIELDS = (
        Field('changed_at', 'changedAt', Quoted(ISO_8601)),
        Field('changed_from', 'changedFrom', TEXT),
        Field('changed_to', 'changedTo', TEXT),
    )


@dataclass(frozen=True)
class ScreenNameChange(Record):
    account_id: int
    screen_name_change: ScreenNameChangeDetail

    FIELDS = (
        Field('account_id', 'accountId', ID),
        Field('screen_name_change', 'screenNameChange', Nested(ScreenNameChangeDetail)),
    )


@dataclass(frozen=True)
class EmailChange(Record):
    changed_at: datetime
    changed_to: str

    FIELDS = (
        Field('changed_at', 'changedAt', Quoted(ISO_8601)),
        Field('changed_to', 'changedTo', TEXT),
    )


@dataclass(frozen=True)
class EmailAddressChange(Record):
    account_id: int
    email_change: EmailChange

    FIELDS = (
        Field('account_id', 'accountId', ID),
        Field('email_change', 'emailChange', Nested(EmailChange)),
    )


@dataclass(frozen=True)
class PhoneNumber(Record):
    phone_number: str

    FIELDS = (
        Field('phone_number', 'phoneNumber', TEXT),
    )


@dataclass(frozen=True)
class Verified(Record):
    account_id: int
    verified: bool

    FIELDS = (
        Field('account_id', 'accountId', ID),
        Field('verified', 'verified', BOOLEAN),
    )
