"""
Diff Generator Service - Build side-by-side comparisons of two texts
"""

from __future__ import annotations

from collections.abc import Iterator

from models.compare import ComparisonResult, DiffStats, StreamEvent
from models.diff import DiffResult, Side
from services.diff_engine import DEFAULT_ALGORITHM, compute_diff
from services.line_projector import project, project_both


class DiffGenerator:
    """Generate segment lists and projected rows for two texts"""

    def __init__(self, default_algorithm: str = DEFAULT_ALGORITHM):
        self.default_algorithm = default_algorithm

    def generate(
        self,
        old_text: str,
        new_text: str,
        algorithm: str | None = None,
    ) -> ComparisonResult:
        """Compute diff, both projections and stats; raises ValueError for unknown algorithms"""
        algorithm = algorithm or self.default_algorithm
        diff = compute_diff(old_text, new_text, algorithm)
        old_rows, new_rows = project_both(diff)

        print(
            f"[DiffGenerator] Compared {len(old_rows)} -> {len(new_rows)} lines "
            f"with {algorithm} (edit distance: {diff.edit_distance})"
        )

        return ComparisonResult(
            segments=diff.segments,
            old_rows=old_rows,
            new_rows=new_rows,
            stats=self._stats(diff, len(old_rows), len(new_rows)),
            algorithm=algorithm,
        )

    def iter_events(
        self,
        old_text: str,
        new_text: str,
        algorithm: str | None = None,
    ) -> Iterator[StreamEvent]:
        """Yield a comparison as stream events: segments, rows per side, then done"""
        algorithm = algorithm or self.default_algorithm
        diff = compute_diff(old_text, new_text, algorithm)

        for segment in diff.segments:
            yield StreamEvent(type="segment", segment=segment)

        old_rows = project(diff, Side.OLD)
        new_rows = project(diff, Side.NEW)
        yield StreamEvent(type="rows", side=Side.OLD, rows=old_rows)
        yield StreamEvent(type="rows", side=Side.NEW, rows=new_rows)

        stats = self._stats(diff, len(old_rows), len(new_rows))
        yield StreamEvent(
            type="done",
            done=True,
            metadata={"algorithm": algorithm, "stats": stats.model_dump()},
        )

    @staticmethod
    def _stats(diff: DiffResult, old_line_count: int, new_line_count: int) -> DiffStats:
        return DiffStats(
            added=diff.added_count,
            removed=diff.removed_count,
            unchanged=diff.unchanged_count,
            old_line_count=old_line_count,
            new_line_count=new_line_count,
        )
