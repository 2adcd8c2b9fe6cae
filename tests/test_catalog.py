"""Tests for gittr.catalog package."""

import json

import httpx
import pytest
from pydantic import ValidationError

from gittr.catalog import (
    DEFAULT_SOURCE_URL,
    EmojiCatalog,
    EmojiRecord,
    FetchError,
    get_cache_file_path,
    parse_catalog,
)
from gittr.catalog.bundled import BUNDLED_EMOJIS


def _response(status_code=200, json_data=None, content=None):
    """Build an httpx response bound to a request so raise_for_status works."""
    request = httpx.Request("GET", DEFAULT_SOURCE_URL)
    if json_data is not None:
        return httpx.Response(status_code, json=json_data, request=request)
    return httpx.Response(status_code, content=content or b"", request=request)


class TestEmojiRecord:
    """Tests for the EmojiRecord model."""

    def test_is_immutable(self):
        """Test that records cannot be modified."""
        record = EmojiRecord(name="tada", emoji="🎉", code=":tada:", description="party")

        with pytest.raises(ValidationError):
            record.name = "bug"

    def test_ignores_extra_fields(self):
        """Test that gitmoji's extra keys are dropped."""
        record = EmojiRecord.model_validate({
            "name": "tada", "emoji": "🎉", "code": ":tada:",
            "description": "party", "entity": "&#127881;", "semver": "minor",
        })

        assert record.model_dump() == {
            "name": "tada", "emoji": "🎉", "code": ":tada:", "description": "party",
        }

    def test_shortcode(self):
        """Test that shortcode wraps the name in colons."""
        record = EmojiRecord(name="white-check-mark", emoji="✅", code=":white_check_mark:", description="tests")

        assert record.shortcode == ":white-check-mark:"


class TestParseCatalog:
    """Tests for parse_catalog."""

    def test_parses_gitmoji_payload(self, sample_gitmoji_payload):
        """Test parsing the {"gitmojis": [...]} shape."""
        result = parse_catalog(sample_gitmoji_payload)

        assert [record.name for record in result] == ["art", "bug"]
        assert isinstance(result, tuple)

    def test_parses_bare_list(self):
        """Test parsing a plain list of records."""
        result = parse_catalog([{"name": "tada", "emoji": "🎉", "code": ":tada:", "description": "party"}])

        assert result[0].code == ":tada:"

    def test_rejects_unknown_shape(self):
        """Test that a dict without gitmojis is rejected."""
        with pytest.raises(ValueError):
            parse_catalog({"emojis": []})

    def test_rejects_incomplete_record(self):
        """Test that a record missing fields is rejected."""
        with pytest.raises(ValueError):
            parse_catalog([{"name": "tada"}])

    def test_bundled_catalog_is_valid(self):
        """Test that the bundled snapshot parses with unique names."""
        result = parse_catalog(BUNDLED_EMOJIS)

        names = [record.name for record in result]
        assert len(names) == len(set(names))
        assert "tada" in names


class TestEmojiCatalogGet:
    """Tests for non-forced catalog access."""

    def test_uses_bundled_catalog_without_cache(self, config_dir, mocker):
        """Test that the bundled list is used when no cache exists."""
        mock_get = mocker.patch("gittr.catalog.provider.httpx.get")

        result = EmojiCatalog().get()

        assert len(result) == len(BUNDLED_EMOJIS)
        mock_get.assert_not_called()

    def test_prefers_cache_file(self, config_dir, sample_gitmoji_payload):
        """Test that a cached catalog beats the bundled one."""
        config_dir.mkdir(parents=True)
        get_cache_file_path().write_text(json.dumps(sample_gitmoji_payload))

        result = EmojiCatalog().get()

        assert [record.name for record in result] == ["art", "bug"]

    def test_ignores_corrupt_cache(self, config_dir):
        """Test that a broken cache falls back to the bundled list."""
        config_dir.mkdir(parents=True)
        get_cache_file_path().write_text("not json")

        result = EmojiCatalog().get()

        assert len(result) == len(BUNDLED_EMOJIS)

    def test_returns_same_tuple_on_repeat(self, config_dir, mocker):
        """Test that the in-memory catalog is reused without reloading."""
        catalog = EmojiCatalog()
        first = catalog.get()
        mock_load = mocker.patch.object(catalog, "_load_local")

        second = catalog.get()

        assert second is first
        mock_load.assert_not_called()


class TestEmojiCatalogRefresh:
    """Tests for forced refresh."""

    def test_refresh_replaces_catalog_and_writes_cache(self, config_dir, mocker, sample_gitmoji_payload):
        """Test a successful refresh."""
        mocker.patch(
            "gittr.catalog.provider.httpx.get",
            return_value=_response(json_data=sample_gitmoji_payload),
        )
        catalog = EmojiCatalog()
        catalog.get()

        result = catalog.get(force_refresh=True)

        assert [record.name for record in result] == ["art", "bug"]
        assert catalog.get() == result
        cached = json.loads(get_cache_file_path().read_text())
        assert [item["name"] for item in cached["gitmojis"]] == ["art", "bug"]

    def test_refresh_uses_configured_source(self, config_dir, mocker, sample_gitmoji_payload):
        """Test that the source URL can be overridden via the environment."""
        mocker.patch.dict("os.environ", {"GITTR_EMOJI_SOURCE": "https://example.test/emojis.json"})
        mock_get = mocker.patch(
            "gittr.catalog.provider.httpx.get",
            return_value=_response(json_data=sample_gitmoji_payload),
        )

        EmojiCatalog().get(force_refresh=True)

        assert mock_get.call_args[0][0] == "https://example.test/emojis.json"

    def test_unreachable_source_keeps_previous_catalog(self, config_dir, mocker):
        """Test that a network failure raises FetchError and keeps the cache."""
        catalog = EmojiCatalog()
        before = catalog.get()
        mocker.patch(
            "gittr.catalog.provider.httpx.get",
            side_effect=httpx.ConnectError("unreachable"),
        )

        with pytest.raises(FetchError):
            catalog.get(force_refresh=True)

        assert catalog.get() is before
        assert not get_cache_file_path().exists()

    def test_http_error_status_raises(self, config_dir, mocker):
        """Test that non-2xx responses raise FetchError."""
        mocker.patch(
            "gittr.catalog.provider.httpx.get",
            return_value=_response(status_code=404, content=b"not found"),
        )

        with pytest.raises(FetchError):
            EmojiCatalog().get(force_refresh=True)

    def test_invalid_json_raises(self, config_dir, mocker):
        """Test that a non-JSON body raises FetchError."""
        mocker.patch(
            "gittr.catalog.provider.httpx.get",
            return_value=_response(content=b"<html></html>"),
        )

        with pytest.raises(FetchError):
            EmojiCatalog().get(force_refresh=True)

    def test_cache_write_failure_is_not_fatal(self, config_dir, mocker, sample_gitmoji_payload):
        """Test that a refresh succeeds even if the cache can't be written."""
        mocker.patch(
            "gittr.catalog.provider.httpx.get",
            return_value=_response(json_data=sample_gitmoji_payload),
        )
        catalog = EmojiCatalog()
        mocker.patch("builtins.open", side_effect=PermissionError("read-only"))

        result = catalog.get(force_refresh=True)

        assert len(result) == 2
