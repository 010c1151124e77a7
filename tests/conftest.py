"""Shared fixtures for update server tests."""

import base64

import pytest

from jex_update.config import Settings
from jex_update.entities import Release, ReleaseAsset, RemoteFile
from jex_update.exceptions import SourceClientError


def manifest_xml(
    client: str = "site",
    name: str = "Weather Module",
    description: str | None = "Shows the weather",
    author: str = "Acme Team",
    author_url: str = "https://acme.example.com",
) -> bytes:
    """Build a minimal Joomla installation manifest."""
    description_xml = f"<description>{description}</description>" if description is not None else ""
    return (
        f'<?xml version="1.0" encoding="utf-8"?>'
        f'<extension type="module" version="3.9" client="{client}" method="upgrade">'
        f"<name>{name}</name>"
        f"<author>{author}</author>"
        f"<authorUrl>{author_url}</authorUrl>"
        f"{description_xml}"
        f"</extension>"
    ).encode("utf-8")


def remote_file(path: str, data: bytes) -> RemoteFile:
    return RemoteFile(path=path, content=base64.b64encode(data).decode("ascii"))


def release(tag: str = "v1.2.3", assets: int = 1) -> Release:
    return Release(
        tag_name=tag,
        html_url=f"https://github.com/acme/ext/releases/tag/{tag}",
        assets=tuple(
            ReleaseAsset(browser_download_url=f"https://github.com/acme/ext/releases/download/{tag}/ext-{i}.zip")
            for i in range(assets)
        ),
    )


class FakeSourceClient:
    """In-memory SourceClient.

    files maps (vendor, identifier, filename) to RemoteFile, releases maps
    (vendor, identifier) to Release. A value that is an Exception is raised.
    """

    def __init__(self, files: dict | None = None, releases: dict | None = None) -> None:
        self.files = files or {}
        self.releases = releases or {}
        self.calls: list[tuple] = []

    async def get_file(self, vendor, identifier, filename):
        self.calls.append(("get_file", vendor, identifier, filename))
        value = self.files.get((vendor, identifier, filename))
        if isinstance(value, Exception):
            raise value
        return value

    async def get_latest_release(self, vendor, identifier):
        self.calls.append(("get_latest_release", vendor, identifier))
        value = self.releases.get((vendor, identifier))
        if isinstance(value, Exception):
            raise value
        return value

    def add_extension(self, vendor: str, identifier: str, tag: str = "v1.2.3", **manifest_kwargs) -> None:
        filename = "templateDetails.xml" if identifier.startswith("tpl") else f"{identifier}.xml"
        self.files[(vendor, identifier, filename)] = remote_file(filename, manifest_xml(**manifest_kwargs))
        self.releases[(vendor, identifier)] = release(tag)


class FrozenClock:
    """Clock returning a settable timestamp."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.current = now

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


@pytest.fixture
def source_client():
    """Fake source client with two healthy extensions."""
    client = FakeSourceClient()
    client.add_extension("acme", "mod_weather", tag="v1.2.3")
    client.add_extension("globex", "com_shop", tag="2.0.0", client="administrator", name="Shop")
    return client


@pytest.fixture
def failing_client():
    """Fake source client whose every call fails."""
    error = SourceClientError("GitHub API error: boom")
    return FakeSourceClient(
        files={("acme", "mod_weather", "mod_weather.xml"): error},
        releases={("acme", "mod_weather"): error},
    )


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a temporary cache directory."""
    return Settings(
        server_name="Acme Updates",
        server_description="Acme extension updates",
        repositories={"mod_weather": "acme", "com_shop": "globex"},
        cache_ttl=60,
        cache_dir=str(tmp_path / "cache"),
        github_api_url="https://api.github.test",
        github_token=None,
        download_format="zip",
        description_from_name=False,
    )
