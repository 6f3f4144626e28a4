"""Tests for reading an extracted archive directory."""

import logging

import pytest

from conftest import file_text
from twitter_archive_codec.archive import Archive, DirectoryProvider
from twitter_archive_codec.config import Config
from twitter_archive_codec.errors import MalformedPrimitive, MalformedRecord, UnsupportedCategory


def tweet(tweet_id, text):
    return {"tweet": {
        "id_str": str(tweet_id),
        "created_at": "Sat Aug 12 16:10:37 +0000 2023",
        "full_text": text,
    }}


@pytest.fixture
def archive_dir(tmp_path, manifest_text):
    data = tmp_path / "data"
    data.mkdir()
    (data / "manifest.js").write_text(manifest_text, encoding="utf-8")
    (data / "account.js").write_text(file_text("window.YTD.account.part0 = ", [{"account": {
        "email": "someone@example.com",
        "createdVia": "web",
        "username": "S0_And_S0",
        "accountId": "111111111",
        "createdAt": "2011-05-01T12:00:00.000Z",
        "accountDisplayName": "S0AndS0.eth",
    }}]), encoding="utf-8")
    (data / "tweets.js").write_text(
        file_text("window.YTD.tweets.part0 = ", [tweet(1, "first")]), encoding="utf-8")
    (data / "tweets-part1.js").write_text(
        file_text("window.YTD.tweets.part1 = ", [tweet(2, "second")]), encoding="utf-8")
    return tmp_path


@pytest.fixture
def archive(archive_dir):
    return Archive(DirectoryProvider(archive_dir), Config())


def test_manifest_is_loaded_once(archive):
    assert archive.manifest is archive.manifest
    assert archive.username == "S0_And_S0"


def test_available_categories(archive):
    assert archive.available_categories() == ("account", "tweets")


def test_load_concatenates_parts_in_order(archive, caplog):
    with caplog.at_level(logging.INFO, logger="twitter_archive_codec.archive"):
        tweets = archive.load("tweets")
    assert [t.full_text for t in tweets] == ["first", "second"]
    assert "Loaded 2 tweets records from 2 file(s)" in caplog.text


def test_read_single_part(archive):
    (second,) = archive.read("tweets", part=1)
    assert second.id == 2
    (account,) = archive.read("account")
    assert account.account_display_name == "S0AndS0.eth"


def test_load_category_without_files(archive, caplog):
    with caplog.at_level(logging.WARNING, logger="twitter_archive_codec.archive"):
        assert archive.load("follower") == ()
    assert "Manifest lists no files for follower" in caplog.text


def test_load_unsupported_category(archive):
    with pytest.raises(UnsupportedCategory):
        archive.load("note_tweet")


def test_decode_failure_is_logged_and_raised(archive_dir, caplog):
    (archive_dir / "data" / "tweets-part1.js").write_text(
        file_text("window.YTD.tweets.part1 = ", [tweet("x1", "bad")]), encoding="utf-8")
    archive = Archive(DirectoryProvider(archive_dir), Config())
    with caplog.at_level(logging.ERROR, logger="twitter_archive_codec.archive"):
        with pytest.raises(MalformedPrimitive):
            archive.load("tweets")
    assert "Failed to decode data/tweets-part1.js" in caplog.text


def test_broken_manifest(archive_dir, caplog):
    (archive_dir / "data" / "manifest.js").write_text("window.__THAR_CONFIG = {", encoding="utf-8")
    archive = Archive(DirectoryProvider(archive_dir), Config())
    with caplog.at_level(logging.ERROR, logger="twitter_archive_codec.archive"):
        with pytest.raises(MalformedRecord):
            archive.manifest
    assert "Failed to decode manifest" in caplog.text


def test_encode_uses_configured_indentation(archive):
    tweets = archive.load("tweets")
    assert archive.encode("tweets", tweets[:1]) == file_text(
        "window.YTD.tweets.part0 = ", [tweet(1, "first")])
    archive.config.indent_output = True
    assert archive.encode("tweets", tweets[1:], part=1).startswith(
        'window.YTD.tweets.part1 = [\n  {\n    "tweet": {')


def test_custom_data_dir(tmp_path, manifest_data):
    data = tmp_path / "export"
    data.mkdir()
    manifest_data["dataTypes"] = {"like": {"files": [{
        "fileName": "export/like.js", "globalName": "YTD.like.part0", "count": "1",
    }]}}
    (data / "manifest.js").write_text(
        file_text("window.__THAR_CONFIG = ", manifest_data), encoding="utf-8")
    (data / "like.js").write_text(file_text("window.YTD.like.part0 = ", [{"like": {
        "tweetId": "7", "expandedUrl": "https://twitter.com/i/web/status/7",
    }}]), encoding="utf-8")

    config = Config.from_dict({"data_dir": "export"})
    archive = Archive(DirectoryProvider(tmp_path), config)
    assert archive.username == "S0_And_S0"
    assert archive.read("like")[0].tweet_id == 7
    assert archive.load("like") == archive.read("like")


def test_from_directory_uses_configured_encoding(tmp_path, manifest_data):
    data = tmp_path / "data"
    data.mkdir()
    manifest_data["userInfo"]["displayName"] = "Zoë"
    manifest_data["dataTypes"] = {}
    (data / "manifest.js").write_text(
        file_text("window.__THAR_CONFIG = ", manifest_data), encoding="utf-16")

    archive = Archive.from_directory(tmp_path, Config.from_dict({"encoding": "utf-16"}))
    assert isinstance(archive.provider, DirectoryProvider)
    assert archive.provider.encoding == "utf-16"
    assert archive.manifest.user_info.display_name == "Zoë"
