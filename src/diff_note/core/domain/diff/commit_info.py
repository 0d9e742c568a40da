from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CommitInfo:
    sha: str
    message: str
    conventional_type: str | None = None

    @property
    def subject(self) -> str:
        return self.message.split("\n", 1)[0]
