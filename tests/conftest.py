"""Shared archive fixtures."""

import copy

import orjson
import pytest

TWEET_TEXT = (
    'window.YTD.tweets.part0 = [{"tweet":{"id_str":"123",'
    '"created_at":"Wed Oct 10 20:19:24 +0000 2018","full_text":"hello"}}]'
)

PHOTO = {
    "expanded_url": "https://twitter.com/example/status/1690395372546301952/photo/1",
    "indices": ["52", "75"],
    "url": "https://t.co/media",
    "media_url": "http://pbs.twimg.com/media/F3abc.jpg",
    "id_str": "1690395300000000000",
    "id": "1690395300000000000",
    "media_url_https": "https://pbs.twimg.com/media/F3abc.jpg",
    "sizes": {
        "medium": {"w": "1200", "h": "675", "resize": "fit"},
        "thumb": {"w": "150", "h": "150", "resize": "crop"},
        "small": {"w": "680", "h": "383", "resize": "fit"},
        "large": {"w": "1920", "h": "1080", "resize": "fit"},
    },
    "type": "photo",
    "display_url": "pic.twitter.com/media",
}

FULL_TWEET = {
    "edit_info": {
        "initial": {
            "editTweetIds": ["1690395372546301952"],
            "editableUntil": "2023-08-12T17:10:37.000Z",
            "editsRemaining": "5",
            "isEditEligible": False,
        }
    },
    "retweeted": False,
    "source": "<a href=\"https://mobile.twitter.com\" rel=\"nofollow\">Twitter Web App</a>",
    "entities": {
        "hashtags": [{"text": "python", "indices": ["20", "27"]}],
        "symbols": [],
        "media": [PHOTO],
        "user_mentions": [{
            "name": "Example",
            "screen_name": "example",
            "indices": ["0", "8"],
            "id_str": "12345",
            "id": "12345",
        }],
        "urls": [{
            "url": "https://t.co/abc",
            "expanded_url": "https://example.com",
            "display_url": "example.com",
            "indices": ["28", "51"],
        }],
    },
    "display_text_range": ["0", "51"],
    "favorite_count": "3",
    "in_reply_to_status_id_str": "1690395372546301000",
    "id_str": "1690395372546301952",
    "in_reply_to_user_id": "12345",
    "truncated": False,
    "retweet_count": "0",
    "id": "1690395372546301952",
    "in_reply_to_status_id": "1690395372546301000",
    "possibly_sensitive": False,
    "created_at": "Sat Aug 12 16:10:37 +0000 2023",
    "favorited": False,
    "full_text": "@example hello from #python https://t.co/abc https://t.co/media",
    "lang": "en",
    "in_reply_to_screen_name": "example",
    "in_reply_to_user_id_str": "12345",
    "extended_entities": {"media": [PHOTO]},
}

GROUP_CONVERSATION = {
    "conversationId": "6666666666666666666",
    "messages": [
        {"messageCreate": {
            "reactions": [{
                "senderId": "111111111",
                "reactionKey": "like",
                "eventId": "5555555555555555555",
                "createdAt": "2023-08-12T16:11:00.000Z",
            }],
            "urls": [],
            "text": "Sup!?",
            "mediaUrls": [],
            "senderId": "222222222",
            "id": "4444444444444444444",
            "createdAt": "2023-08-12T16:10:37.000Z",
        }},
        {"participantsLeave": {
            "userIds": ["1234", "9876"],
            "createdAt": "2023-08-12T16:12:00.000Z",
        }},
        {"joinConversation": {
            "initiatingUserId": "111111111",
            "participantsSnapshot": ["222222222", "111111111"],
            "createdAt": "2023-08-12T16:00:00.000Z",
        }},
        {"conversationNameUpdate": {
            "initiatingUserId": "111111111",
            "name": "Weekend plans",
            "createdAt": "2023-08-12T16:13:00.000Z",
        }},
    ],
}

MANIFEST = {
    "userInfo": {
        "accountId": "111111111",
        "userName": "S0_And_S0",
        "displayName": "S0AndS0.eth",
    },
    "archiveInfo": {
        "sizeBytes": "44546997",
        "generationDate": "2023-08-31T00:00:00.000Z",
        "isPartialArchive": False,
        "maxPartSizeBytes": "53687091200",
    },
    "readmeInfo": {
        "fileName": "data/README.txt",
        "directory": "data/",
        "name": "README.txt",
    },
    "dataTypes": {
        "account": {
            "files": [{
                "fileName": "data/account.js",
                "globalName": "YTD.account.part0",
                "count": "1",
            }]
        },
        "noteTweet": {
            "files": [{
                "fileName": "data/note-tweet.js",
                "globalName": "YTD.note_tweet.part0",
                "count": "4",
            }]
        },
        "tweets": {
            "mediaDirectory": "data/tweets_media",
            "files": [
                {
                    "fileName": "data/tweets-part1.js",
                    "globalName": "YTD.tweets.part1",
                    "count": "1",
                },
                {
                    "fileName": "data/tweets.js",
                    "globalName": "YTD.tweets.part0",
                    "count": "1",
                },
            ]
        },
        "tweetsMedia": {
            "mediaDirectory": "data/tweets_media",
        },
    },
}


def file_text(prefix: str, payload) -> str:
    """Compact archive file text for ``payload``."""
    return prefix + orjson.dumps(payload).decode('utf-8')


@pytest.fixture
def tweet_text():
    return TWEET_TEXT


@pytest.fixture
def full_tweet():
    return copy.deepcopy(FULL_TWEET)


@pytest.fixture
def group_conversation():
    return copy.deepcopy(GROUP_CONVERSATION)


@pytest.fixture
def manifest_data():
    return copy.deepcopy(MANIFEST)


@pytest.fixture
def manifest_text(manifest_data):
    return file_text("window.__THAR_CONFIG = ", manifest_data)
