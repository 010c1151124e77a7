"""Source hosting client protocol.

Defines the interface for the remote service that hosts extension
repositories and publishes their releases.
"""

from typing import Protocol, runtime_checkable

from jex_update.entities import Release, RemoteFile


@runtime_checkable
class SourceClient(Protocol):
    """Protocol for source hosting API clients.

    Example:
        ```python
        from jex_update.protocols import SourceClient

        client: SourceClient = GitHubSourceClient.create()
        client: SourceClient = FakeSourceClient(files={...})
        ```
    """

    async def get_file(self, vendor: str, identifier: str, filename: str) -> RemoteFile | None:
        """Fetch a file from the repository's default branch.

        Args:
            vendor: Repository owner
            identifier: Repository name
            filename: Path of the file inside the repository

        Returns:
            The file, or None if it does not exist

        Raises:
            SourceClientError: If the API call fails for any other reason
        """
        ...

    async def get_latest_release(self, vendor: str, identifier: str) -> Release | None:
        """Fetch the latest published release.

        Args:
            vendor: Repository owner
            identifier: Repository name

        Returns:
            The release, or None if the repository has no release

        Raises:
            SourceClientError: If the API call fails for any other reason
        """
        ...
