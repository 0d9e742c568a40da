from pydantic import BaseModel, Field


class GitHubPullFileModel(BaseModel):
    filename: str
    status: str = "modified"
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)
    patch: str | None = None


class GitHubCommitDetail(BaseModel):
    message: str = ""


class GitHubPullCommitModel(BaseModel):
    sha: str
    commit: GitHubCommitDetail
