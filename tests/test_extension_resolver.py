"""
Tests for resolving catalog entries against a source client.
"""

from conftest import FakeSourceClient, release, remote_file
from jex_update.entities import CatalogEntry, SkipReason
from jex_update.exceptions import SourceClientError
from jex_update.services import ExtensionResolver


async def test_resolve_success(source_client):
    """Test that a complete entry resolves to ExtensionInfo."""
    result = await ExtensionResolver(source_client).resolve(CatalogEntry("mod_weather", "acme"))

    assert result.ok
    assert result.info.manifest.client == "site"
    assert result.info.version == "1.2.3"
    assert result.info.release.download_url.endswith(".zip")


async def test_template_uses_template_details():
    """Test that templates fetch templateDetails.xml."""
    client = FakeSourceClient()
    client.add_extension("acme", "tpl_dark")

    result = await ExtensionResolver(client).resolve(CatalogEntry("tpl_dark", "acme"))

    assert result.ok
    assert ("get_file", "acme", "tpl_dark", "templateDetails.xml") in client.calls


async def test_missing_manifest_is_skipped():
    """Test that a missing manifest skips without fetching the release."""
    client = FakeSourceClient()
    result = await ExtensionResolver(client).resolve(CatalogEntry("mod_weather", "acme"))

    assert not result.ok
    assert result.reason is SkipReason.MANIFEST_MISSING
    assert all(call[0] != "get_latest_release" for call in client.calls)


async def test_release_without_assets_is_skipped(source_client):
    """Test that a release with zero assets is incomplete."""
    source_client.releases[("acme", "mod_weather")] = release(assets=0)

    result = await ExtensionResolver(source_client).resolve(CatalogEntry("mod_weather", "acme"))

    assert result.reason is SkipReason.NO_RELEASE_ASSETS
    assert "acme/mod_weather" in result.detail


async def test_no_release_is_skipped(source_client):
    """Test that a repository without releases is skipped."""
    del source_client.releases[("acme", "mod_weather")]

    result = await ExtensionResolver(source_client).resolve(CatalogEntry("mod_weather", "acme"))

    assert result.reason is SkipReason.NO_RELEASE_ASSETS


async def test_fetch_failure_is_skipped(failing_client):
    """Test that client errors become FETCH_FAILED results."""
    result = await ExtensionResolver(failing_client).resolve(CatalogEntry("mod_weather", "acme"))

    assert result.reason is SkipReason.FETCH_FAILED
    assert "boom" in result.detail


async def test_release_fetch_failure_is_skipped(source_client):
    """Test that a failing release call also becomes FETCH_FAILED."""
    source_client.releases[("acme", "mod_weather")] = SourceClientError("timeout")

    result = await ExtensionResolver(source_client).resolve(CatalogEntry("mod_weather", "acme"))

    assert result.reason is SkipReason.FETCH_FAILED


async def test_malformed_manifest_is_skipped():
    """Test that unparseable manifests become INVALID_MANIFEST results."""
    client = FakeSourceClient(
        files={("acme", "mod_weather", "mod_weather.xml"): remote_file("mod_weather.xml", b"<extension")},
        releases={("acme", "mod_weather"): release()},
    )

    result = await ExtensionResolver(client).resolve(CatalogEntry("mod_weather", "acme"))

    assert result.reason is SkipReason.INVALID_MANIFEST


async def test_resolve_all_keeps_going_and_order(source_client):
    """Test that one failing entry does not stop the others."""
    source_client.files[("acme", "mod_broken", "mod_broken.xml")] = SourceClientError("boom")
    entries = [
        CatalogEntry("mod_broken", "acme"),
        CatalogEntry("mod_weather", "acme"),
        CatalogEntry("com_shop", "globex"),
    ]

    results = await ExtensionResolver(source_client).resolve_all(entries)

    assert [r.entry.identifier for r in results] == ["mod_broken", "mod_weather", "com_shop"]
    assert [r.ok for r in results] == [False, True, True]


async def test_manifest_without_client_resolves():
    """Test that a plugin manifest with no client attribute is not skipped."""
    client = FakeSourceClient(
        files={
            ("acme", "plg_system_cache", "plg_system_cache.xml"): remote_file(
                "plg_system_cache.xml",
                b'<extension type="plugin" group="system" method="upgrade"><name>Sys</name></extension>',
            )
        },
        releases={("acme", "plg_system_cache"): release()},
    )

    result = await ExtensionResolver(client).resolve(CatalogEntry("plg_system_cache", "acme"))

    assert result.ok
    assert result.info.manifest.client is None
