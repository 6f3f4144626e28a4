"""Tests for the manifest schema."""

from datetime import datetime, timezone

import pytest

from conftest import file_text
from twitter_archive_codec.errors import (
    MalformedPrimitive, MalformedRecord, PrefixMismatch, UnsupportedCategory,
)
from twitter_archive_codec.manifest import (
    MANIFEST_PREFIX, DataType, ManifestDrift, decode_manifest, encode_manifest,
)


def test_decode_manifest(manifest_text):
    manifest = decode_manifest(manifest_text)
    assert manifest.user_handle == "S0_And_S0"
    assert manifest.user_info.account_id == 111111111
    assert manifest.generation_date == datetime(2023, 8, 31, tzinfo=timezone.utc)
    assert manifest.archive_info.size_bytes == 44546997
    assert manifest.archive_info.is_partial_archive is False
    assert manifest.readme_info.name == "README.txt"
    assert [data_type.name for data_type in manifest.data_types] == [
        "account", "noteTweet", "tweets", "tweetsMedia"]


def test_manifest_round_trips_byte_for_byte(manifest_text):
    assert encode_manifest(decode_manifest(manifest_text)) == manifest_text


def test_manifest_indented_output_decodes(manifest_text):
    manifest = decode_manifest(manifest_text)
    indented = encode_manifest(manifest, indent=True)
    assert indented.startswith(MANIFEST_PREFIX + "{\n  ")
    assert decode_manifest(indented) == manifest


def test_media_only_data_type(manifest_text):
    media = decode_manifest(manifest_text).category_entry("tweetsMedia")
    assert media == DataType(name="tweetsMedia", media_directory="data/tweets_media")
    assert media.files is None


def test_category_entry_missing(manifest_text):
    assert decode_manifest(manifest_text).category_entry("follower") is None


def test_entries_in_manifest_order(manifest_text):
    entries = decode_manifest(manifest_text).entries()
    assert [(entry.category, entry.part) for entry in entries] == [
        ("account", 0), ("note_tweet", 0), ("tweets", 1), ("tweets", 0)]
    account = entries[0]
    assert account.data_type == "account"
    assert account.path == "data/account.js"
    assert account.count == 1
    assert account.supported
    assert account.schema.wrapper_key == "account"
    assert account.description


def test_files_for_orders_parts(manifest_text):
    files = decode_manifest(manifest_text).files_for("tweets")
    assert [entry.path for entry in files] == ["data/tweets.js", "data/tweets-part1.js"]
    assert decode_manifest(manifest_text).files_for("like") == ()


def test_unsupported_categories(manifest_text):
    manifest = decode_manifest(manifest_text)
    assert manifest.unsupported_categories() == ("note_tweet",)
    (note,) = manifest.files_for("note_tweet")
    assert not note.supported
    assert note.description is None
    with pytest.raises(UnsupportedCategory) as excinfo:
        note.schema
    assert excinfo.value.category == "note_tweet"


def test_unknown_data_types_are_kept(manifest_data):
    manifest_data["dataTypes"]["grokChatItem"] = {"files": [{
        "fileName": "data/grok-chat-item.js",
        "globalName": "YTD.grok_chat_item.part0",
        "count": "0",
    }]}
    raw = file_text(MANIFEST_PREFIX, manifest_data)
    manifest = decode_manifest(raw)
    assert manifest.unsupported_categories() == ("note_tweet", "grok_chat_item")
    assert encode_manifest(manifest) == raw


def test_drift(manifest_data):
    current = decode_manifest(file_text(MANIFEST_PREFIX, manifest_data))
    del manifest_data["dataTypes"]["noteTweet"]
    manifest_data["dataTypes"]["follower"] = {"files": []}
    older = decode_manifest(file_text(MANIFEST_PREFIX, manifest_data))

    drift = current.drift(older)
    assert drift == ManifestDrift(added=("noteTweet",), removed=("follower",))
    assert drift
    assert not current.drift(current)


def test_manifest_prefix_is_required(manifest_data):
    with pytest.raises(PrefixMismatch) as excinfo:
        decode_manifest(file_text("window.YTD.manifest.part0 = ", manifest_data))
    assert excinfo.value.expected == MANIFEST_PREFIX


def test_manifest_custom_prefix(manifest_data):
    raw = file_text("window.__THAR_CONFIG= ", manifest_data)
    manifest = decode_manifest(raw, prefix="window.__THAR_CONFIG= ")
    assert encode_manifest(manifest, prefix="window.__THAR_CONFIG= ") == raw


def test_manifest_must_be_object():
    with pytest.raises(MalformedRecord):
        decode_manifest(MANIFEST_PREFIX + "[]")


def test_bad_global_name(manifest_data):
    manifest_data["dataTypes"]["account"]["files"][0]["globalName"] = "account.part0"
    with pytest.raises(MalformedPrimitive) as excinfo:
        decode_manifest(file_text(MANIFEST_PREFIX, manifest_data))
    assert excinfo.value.field_path == "dataTypes.account.files[0].globalName"


def test_unknown_data_type_field(manifest_data):
    manifest_data["dataTypes"]["tweets"]["schemaVersion"] = "2"
    with pytest.raises(MalformedRecord) as excinfo:
        decode_manifest(file_text(MANIFEST_PREFIX, manifest_data))
    assert excinfo.value.path == ("dataTypes", "tweets", "schemaVersion")


def test_unknown_top_level_field(manifest_data):
    manifest_data["extra"] = {}
    with pytest.raises(MalformedRecord) as excinfo:
        decode_manifest(file_text(MANIFEST_PREFIX, manifest_data))
    assert excinfo.value.path == ("extra",)
