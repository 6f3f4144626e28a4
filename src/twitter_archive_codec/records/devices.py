"""Login, device and third-party application records."""

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from ..primitives import DATE_YMD, ID_STRING, ISO_8601
from .base import TEXT, Field, ListOf, Nested, Quoted, Record

ID = Quoted(ID_STRING)


@dataclass(frozen=True)
class IpAudit(Record):
    account_id: int
    created_at: datetime
    login_ip: str

    FIELDS = (
        Field('account_id', 'accountId', ID),
        Field('created_at', 'createdAt', Quoted(ISO_8601)),
        Field('login_ip', 'loginIp', TEXT),
    )


@dataclass(frozen=True)
class DeviceToken(Record):
    client_application_id: int
    token: str
    created_at: datetime
    last_seen_at: datetime
    client_application_name: str

    FIELDS = (
        Field('client_application_id', 'clientApplicationId', ID),
        Field('token', 'token', TEXT),
        Field('created_at', 'createdAt', Quoted(ISO_8601)),
        Field('last_seen_at', 'lastSeenAt', Quoted(ISO_8601)),
        Field('client_application_name', 'clientApplicationName', TEXT),
    )


@dataclass(frozen=True)
class MessagingDevice(Record):
    phone_number: str
    carrier: str
    device_type: str
    updated_date: datetime
    created_date: datetime

    FIELDS = (
        Field('phone_number', 'phoneNumber', TEXT),
        Field('carrier', 'carrier', TEXT),
        Field('device_type', 'deviceType', TEXT),
        Field('updated_date', 'updatedDate', Quoted(DATE_YMD)),
        Field('created_date', 'createdDate', Quoted(DATE_YMD)),
    )


@dataclass(frozen=True)
class NiDevice(Record):
    """``niDeviceResponse`` entry: a phone registered for SMS notifications."""
    messaging_device: MessagingDevice

    FIELDS = (
        Field('messaging_device', 'messagingDevice', Nested(MessagingDevice)),
    )


@dataclass(frozen=True)
class DeviceMetadata(Record):
    user_agent: str
    registration_token: str
    identity_key: str
    created_at: datetime
    device_id: str

    FIELDS = (
        Field('user_agent', 'userAgent', TEXT),
        Field('registration_token', 'registrationToken', TEXT),
        Field('identity_key', 'identityKey', TEXT),
        Field('created_at', 'createdAt', Quoted(ISO_8601)),
        Field('device_id', 'deviceId', TEXT),
    )


@dataclass(frozen=True)
class RegisteredDevices(Record):
    device_metadata_list: Tuple[DeviceMetadata, ...]

    FIELDS = (
        Field('device_metadata_list', 'deviceMetadataList', ListOf(Nested(DeviceMetadata))),
    )


@dataclass(frozen=True)
class Organization(Record):
    name: str
    url: str
    privacy_policy_url: str
    terms_and_conditions_url: str

    FIELDS = (
        Field('name', 'name', TEXT),
        Field('url', 'url', TEXT),
        Field('privacy_policy_url', 'privacyPolicyUrl', TEXT),
        Field('terms_and_conditions_url', 'termsAndConditionsUrl', TEXT),
    )


@dataclass(frozen=True)
class ConnectedApplication(Record):
    organization: Organization
    name: str
    description: str
    permissions: Tuple[str, ...]
    approved_at: datetime
    id: int

    FIELDS = (
        Field('organization', 'organization', Nested(Organization)),
        Field('name', 'name', TEXT),
        Field('description', 'description', TEXT),
        Field('permissions', 'permissions', ListOf(TEXT)),
        Field('approved_at', 'approvedAt', Quoted(ISO_8601)),
        Field('id', 'id', ID),
    )
