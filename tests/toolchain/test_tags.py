"""
Unit tests for tag sources.
"""

import pytest
import requests
import responses

from protockit.core.exceptions import TagSourceError
from protockit.toolchain.catalog import load_versions
from protockit.toolchain.tags import GitHubTagSource, StaticTagSource

TAGS_URL = "https://api.github.com/repos/protocolbuffers/protobuf/tags"
PAGE_2_URL = "https://api.github.com/repositories/23357588/tags?per_page=2&page=2"


class TestStaticTagSource:
    """Tests for StaticTagSource."""

    def test_returns_copy(self):
        source = StaticTagSource(["v1.0"])
        tags = source.fetch_tags()
        tags.append("v2.0")
        assert source.fetch_tags() == ["v1.0"]


class TestGitHubTagSource:
    """Tests for GitHubTagSource."""

    def test_tags_url(self):
        source = GitHubTagSource(repository="owner/repo", api_url="https://ghe.local/api/v3/")
        assert source.tags_url == "https://ghe.local/api/v3/repos/owner/repo/tags"

    @responses.activate
    def test_single_page(self):
        responses.add(
            responses.GET,
            TAGS_URL,
            json=[{"name": "v28.3"}, {"name": "v28.2"}],
            status=200,
        )

        tags = GitHubTagSource(token="").fetch_tags()

        assert tags == ["v28.3", "v28.2"]
        assert "per_page=100" in responses.calls[0].request.url

    @responses.activate
    def test_follows_pagination(self):
        responses.add(
            responses.GET,
            TAGS_URL,
            json=[{"name": "v29.0-rc2"}, {"name": "v28.3"}],
            headers={"Link": f'<{PAGE_2_URL}>; rel="next"'},
            status=200,
        )
        responses.add(
            responses.GET,
            "https://api.github.com/repositories/23357588/tags",
            json=[{"name": "v3.20.1"}],
            status=200,
        )

        tags = GitHubTagSource(token="", per_page=2).fetch_tags()

        assert tags == ["v29.0-rc2", "v28.3", "v3.20.1"]
        assert len(responses.calls) == 2
        assert responses.calls[1].request.url == PAGE_2_URL

    @responses.activate
    def test_sends_token(self):
        responses.add(responses.GET, TAGS_URL, json=[], status=200)

        GitHubTagSource(token="secret").fetch_tags()

        assert responses.calls[0].request.headers["Authorization"] == "Bearer secret"

    @responses.activate
    def test_token_from_environment(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "from-env")
        responses.add(responses.GET, TAGS_URL, json=[], status=200)

        GitHubTagSource().fetch_tags()

        assert responses.calls[0].request.headers["Authorization"] == "Bearer from-env"

    @responses.activate
    def test_no_token(self, monkeypatch):
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        responses.add(responses.GET, TAGS_URL, json=[], status=200)

        GitHubTagSource().fetch_tags()

        assert "Authorization" not in responses.calls[0].request.headers

    @responses.activate
    def test_http_error(self):
        responses.add(responses.GET, TAGS_URL, json={"message": "rate limited"}, status=403)

        with pytest.raises(TagSourceError, match="protocolbuffers/protobuf"):
            GitHubTagSource(token="").fetch_tags()

    @responses.activate
    def test_connection_error(self):
        responses.add(
            responses.GET, TAGS_URL, body=requests.exceptions.ConnectionError("down")
        )

        with pytest.raises(TagSourceError):
            GitHubTagSource(token="").fetch_tags()

    @responses.activate
    def test_unexpected_payload(self):
        responses.add(responses.GET, TAGS_URL, json={"tags": []}, status=200)

        with pytest.raises(TagSourceError, match="expected a list"):
            GitHubTagSource(token="").fetch_tags()

    @responses.activate
    def test_feeds_catalog(self):
        responses.add(
            responses.GET,
            TAGS_URL,
            json=[{"name": "v28.3"}, {"name": "v3.20.1"}, {"name": "v28.2"}],
            status=200,
        )

        catalog = load_versions(GitHubTagSource(token=""))

        assert [str(v) for v in catalog.versions] == ["28.2.0", "28.3.0"]
        assert str(catalog.aliases["latest"]) == "28.3.0"


@pytest.mark.integration
class TestGitHubTagSourceIntegration:
    """Live queries against GitHub (requires --integration)."""

    def test_loads_versions_from_github(self):
        catalog = load_versions(GitHubTagSource())

        assert catalog.versions
        assert catalog.aliases["latest"] == catalog.latest
