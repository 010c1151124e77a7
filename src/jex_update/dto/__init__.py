"""Data Transfer Objects.

These Pydantic models describe payloads crossing the process boundary:
the GitHub REST API responses we consume and the JSON we serve.

Internal domain logic should use entities from the entities package.
"""

from .github import GitHubAssetResponse, GitHubContentResponse, GitHubReleaseResponse
from .responses import HealthCheckResponse

__all__ = [
    "GitHubAssetResponse",
    "GitHubContentResponse",
    "GitHubReleaseResponse",
    "HealthCheckResponse",
]
