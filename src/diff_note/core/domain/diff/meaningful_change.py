from dataclasses import dataclass

from diff_note.core.domain.diff.value_objects.change_direction import ChangeDirection


@dataclass(frozen=True, kw_only=True)
class MeaningfulChange:
    """A single retained content line extracted from a patch.

    ``line_number`` is only known for additions; removed lines have no
    stable position in the new file.
    """

    direction: ChangeDirection
    content: str
    context: str | None = None
    line_number: int | None = None

    @property
    def is_addition(self) -> bool:
        return self.direction is ChangeDirection.ADDED

    @property
    def char_count(self) -> int:
        return len(self.content) + len(self.context or "")

    def render(self) -> str:
        return f"{self.direction.marker} {self.content}"
