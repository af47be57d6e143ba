"""
Per-member progress over the problem catalog.

``ProgressResolver`` performs the in-memory join between problems,
base code templates and a member's records.  It never touches the
database: services fetch the rows in bulk and hand them over, so the
catalog listing costs one records query instead of one per problem.

Two ordering rules are fixed here:

* Best attempt: highest accuracy; among equal accuracies the earliest
  submission (by ``created_at``, then ``record_no``) wins.
* Latest code per language: the record with the greatest
  (``created_at``, ``record_no``) in that language, regardless of the
  order the records were passed in.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from ..schemas.problem import BaseCodeRead, Language, LanguageTemplate, ProblemProgress, ProblemRead
from ..schemas.record import RecordRead


def _chronological_key(record: RecordRead):
    return record.created_at, record.record_no


class ProgressResolver:
    """Pure functions that shape a member's progress for display."""

    @staticmethod
    def best_attempt(records: Iterable[RecordRead]) -> Optional[RecordRead]:
        """Return the highest-accuracy record, or ``None`` when there are none."""
        ordered = sorted(records, key=_chronological_key)
        if not ordered:
            return None
        # max() keeps the first of equal keys, i.e. the earliest record
        return max(ordered, key=lambda record: record.accuracy)

    @classmethod
    def resolve_progress(
        cls,
        problems: Iterable[ProblemRead],
        records: Iterable[RecordRead],
    ) -> List[ProblemProgress]:
        """Annotate every problem with the member's best accuracy.

        ``records`` may span any number of problems.  The result has
        exactly one entry per problem, in the order given.
        """
        by_problem: Dict[int, List[RecordRead]] = defaultdict(list)
        for record in records:
            by_problem[record.problem_no].append(record)

        results: List[ProblemProgress] = []
        for problem in problems:
            best = cls.best_attempt(by_problem.get(problem.problem_no, []))
            results.append(
                ProblemProgress(
                    problem_no=problem.problem_no,
                    title=problem.title,
                    difficulty=problem.difficulty,
                    type=problem.type,
                    accuracy=best.accuracy if best else 0,
                    success=best is not None,
                )
            )
        return results

    @staticmethod
    def latest_per_language(records: Iterable[RecordRead]) -> Dict[Language, RecordRead]:
        latest: Dict[Language, RecordRead] = {}
        for record in records:
            current = latest.get(record.language)
            if current is None or _chronological_key(record) > _chronological_key(current):
                latest[record.language] = record
        return latest

    @classmethod
    def overlay_base_codes(
        cls,
        templates: Iterable[LanguageTemplate],
        records: Iterable[RecordRead],
    ) -> List[BaseCodeRead]:
        """Replace each template's base code with the latest submitted code, if any.

        Templates keep their storage order.  Languages the member never
        submitted in show the base code unmodified.
        """
        latest = cls.latest_per_language(records)
        base_codes: List[BaseCodeRead] = []
        for template in templates:
            record = latest.get(template.language)
            code = record.written_code if record is not None else template.base_code
            base_codes.append(BaseCodeRead(language=template.language, code=code))
        return base_codes
