"""GitHub REST API response DTOs.

Only the fields the update server reads are declared; everything else
in the payload is ignored.
"""

from pydantic import BaseModel, Field


class GitHubContentResponse(BaseModel):
    """Response of GET /repos/{owner}/{repo}/contents/{path} for a file."""

    path: str = Field(..., description="Path of the file inside the repository")
    content: str = Field("", description="File content, encoded as described by `encoding`")
    encoding: str = Field("base64", description="Content encoding, normally base64")


class GitHubAssetResponse(BaseModel):
    """Single release asset."""

    name: str = Field("", description="Asset file name")
    browser_download_url: str = Field(..., description="Public download URL")


class GitHubReleaseResponse(BaseModel):
    """Response of GET /repos/{owner}/{repo}/releases/latest."""

    tag_name: str = Field(..., description="Git tag of the release")
    html_url: str = Field(..., description="Release page URL")
    assets: list[GitHubAssetResponse] = Field(default_factory=list)
