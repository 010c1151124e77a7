"""GitHub implementation of SourceClient.

Talks to the GitHub REST API (v3) over httpx:

- GET /repos/{owner}/{repo}/contents/{path}  -> manifest file
- GET /repos/{owner}/{repo}/releases/latest  -> latest release

A 404 from either endpoint means "absent" and is returned as None.
Every other failure is raised as SourceClientError.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from jex_update.config import Settings, settings
from jex_update.dto import GitHubContentResponse, GitHubReleaseResponse
from jex_update.entities import Release, ReleaseAsset, RemoteFile
from jex_update.exceptions import SourceClientError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class GitHubSourceClient:
    """GitHub REST API client.

    This class satisfies the SourceClient protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = GitHubSourceClient.create()

        manifest = await client.get_file("acme", "mod_weather", "mod_weather.xml")
        release = await client.get_latest_release("acme", "mod_weather")

        await client.close()
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the GitHub client.

        Args:
            base_url: API base URL. Defaults to settings.github_api_url.
            token: Optional personal access token for higher rate limits.
            timeout: Request timeout in seconds. Defaults to settings.http_timeout.
            transport: Custom httpx transport (used by tests).
        """
        self._base_url = (base_url or settings.github_api_url).rstrip("/")
        self._token = token
        self._timeout = timeout or settings.http_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            headers = {
                "Accept": "application/vnd.github+json",
                "User-Agent": "jex-update-server",
            }
            if self._token:
                headers["Authorization"] = f"Bearer {self._token}"
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    @classmethod
    def create(cls, config: Settings | None = None) -> "GitHubSourceClient":
        """Factory method to create a client from settings.

        Args:
            config: Settings to read the API URL, token and timeout from.
                If None, uses the global settings.

        Returns:
            Configured GitHubSourceClient
        """
        config = config or settings
        return cls(
            base_url=config.github_api_url,
            token=config.github_token,
            timeout=config.http_timeout,
        )

    async def get_file(self, vendor: str, identifier: str, filename: str) -> RemoteFile | None:
        data = await self._get_json(f"/repos/{vendor}/{identifier}/contents/{filename}")
        if data is None:
            return None

        payload = self._validate(GitHubContentResponse, data)
        return RemoteFile(path=payload.path, content=payload.content, encoding=payload.encoding)

    async def get_latest_release(self, vendor: str, identifier: str) -> Release | None:
        data = await self._get_json(f"/repos/{vendor}/{identifier}/releases/latest")
        if data is None:
            return None

        payload = self._validate(GitHubReleaseResponse, data)
        return Release(
            tag_name=payload.tag_name,
            html_url=payload.html_url,
            assets=tuple(
                ReleaseAsset(browser_download_url=asset.browser_download_url, name=asset.name)
                for asset in payload.assets
            ),
        )

    async def _get_json(self, path: str) -> Any | None:
        """GET a path and decode the JSON body.

        Returns:
            Decoded JSON, or None on 404

        Raises:
            SourceClientError: On transport errors, non-404 error statuses
                or an undecodable body
        """
        try:
            response = await self.client.get(path)
            if response.status_code == httpx.codes.NOT_FOUND:
                logger.debug("GitHub returned 404 for %s", path)
                return None
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            raise SourceClientError(f"GitHub API error for {path}: {e}") from e
        except ValueError as e:
            raise SourceClientError(f"GitHub API returned invalid JSON for {path}: {e}") from e

    @staticmethod
    def _validate(model: type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise SourceClientError(f"Unexpected GitHub payload for {model.__name__}: {e}") from e

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
