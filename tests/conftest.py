"""Pytest fixtures: canned upstream payloads and a fake HTTP session."""

from unittest.mock import MagicMock

import pytest
import requests
from requests import Session

from patchnotes.config import Settings
from patchnotes.context import FeedContext

META = "https://piston-meta.mojang.com"
LAUNCHER = "https://launchercontent.mojang.com"
MANIFEST_URL = META + "/mc/game/version_manifest_v2.json"
INDEX_URL = LAUNCHER + "/v2/javaPatchNotes.json"


def version(version_id, time, version_type="release"):
    return {
        "id": version_id,
        "type": version_type,
        "url": f"{META}/v1/packages/abc/{version_id}.json",
        "time": time,
        "releaseTime": time,
        "sha1": "0" * 40,
        "complianceLevel": 1,
    }


def raw_entry(entry_id, version_id, content_path, version_type="release"):
    return {
        "title": f"Minecraft Java Edition {version_id}",
        "version": version_id,
        "type": version_type,
        "image": {"title": "Index image", "url": f"/img/{entry_id}-index.png"},
        "contentPath": content_path,
        "id": entry_id,
    }


def article(entry_id, title, body="<p>hi</p>", image_url="/img/x.png"):
    return {
        "title": title,
        "image": {"title": f"{title} image", "url": image_url},
        "body": body,
        "id": entry_id,
    }


def json_response(payload):
    response = MagicMock()
    response.raise_for_status.return_value = None
    response.json.return_value = payload
    return response


def make_session(routes):
    """Session whose get() serves routes[url] and 404s anything else."""
    def get(url, timeout=None):
        if url not in routes:
            response = MagicMock()
            response.raise_for_status.side_effect = requests.HTTPError(f"404 Client Error for url: {url}")
            return response
        return json_response(routes[url])

    session = MagicMock(spec=Session)
    session.headers = {}
    session.get.side_effect = get
    return session


def urls_requested(session):
    return [call.args[0] for call in session.get.call_args_list]


@pytest.fixture
def manifest_payload():
    return {
        "latest": {"release": "1.20", "snapshot": "23w18a"},
        "versions": [
            version("1.20", "2023-06-07T00:00:00Z"),
            version("23w18a", "2023-05-03T12:00:00+00:00", "snapshot"),
            version("1.19.4", "2023-03-14T12:56:18+00:00"),
            version("1.19.3", "2022-12-07T08:17:18+00:00"),
            version("1.19.2", "2022-08-05T11:57:05+00:00"),
            version("1.19.1", "2022-07-27T09:25:33+00:00"),
        ],
    }


@pytest.fixture
def index_entries():
    return [
        raw_entry("a1", "1.20", "x.json"),
        raw_entry("a2", "23w18a", "23w18a.json", "snapshot"),
        raw_entry("a3", "1.19.4", "1.19.4.json"),
        raw_entry("a4", "1.19.3", "1.19.3.json"),
        raw_entry("a5", "1.19.2", "1.19.2.json"),
        raw_entry("a6", "1.19.1", "1.19.1.json"),
        raw_entry("a7", "1.19", "1.19.json"),
    ]


@pytest.fixture
def routes(manifest_payload, index_entries):
    served = {
        MANIFEST_URL: manifest_payload,
        INDEX_URL: {"version": 1, "entries": index_entries},
    }
    for entry in index_entries:
        title = "Real Title" if entry["id"] == "a1" else f"Article {entry['id']}"
        served[f"{LAUNCHER}/v2/{entry['contentPath']}"] = article(entry["id"], title)
    return served


@pytest.fixture
def session(routes):
    return make_session(routes)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def feed_context(settings, session):
    return FeedContext(settings=settings, session=session)
