from codeython_api.app.schemas.problem import Language, LanguageTemplate, ProblemRead
from codeython_api.app.schemas.record import RecordRead
from codeython_api.app.services.progress_resolver import ProgressResolver


def make_record(record_no, accuracy=0, problem_no=1, language="PYTHON", code="", created_at=None):
    stamp = created_at or f"2026-01-01 00:00:{record_no:02d}.000000"
    return RecordRead(
        record_no=record_no,
        problem_no=problem_no,
        member_no=1,
        language=language,
        written_code=code,
        accuracy=accuracy,
        created_at=stamp,
        updated_at=stamp,
    )


def make_problem(problem_no, title=None):
    return ProblemRead(
        problem_no=problem_no,
        title=title or f"Problem {problem_no}",
        content="",
        limit_factor=1,
        limit_time=1000,
        difficulty=1,
        type=[],
        created_at="2026-01-01 00:00:00.000000",
    )


def make_template(language, base_code):
    return LanguageTemplate(language_no=1, problem_no=1, language=language, base_code=base_code)


def test_best_attempt_picks_highest_accuracy():
    records = [make_record(1, 40), make_record(2, 90), make_record(3, 70)]
    assert ProgressResolver.best_attempt(records).accuracy == 90


def test_best_attempt_tie_goes_to_earliest_submission():
    records = [make_record(3, 80), make_record(1, 80), make_record(2, 50)]
    assert ProgressResolver.best_attempt(records).record_no == 1


def test_best_attempt_without_records():
    assert ProgressResolver.best_attempt([]) is None


def test_resolve_progress_one_entry_per_problem_in_catalog_order():
    problems = [make_problem(3), make_problem(1), make_problem(2)]
    records = [make_record(1, 40, problem_no=1), make_record(2, 100, problem_no=2), make_record(3, 70, problem_no=1)]

    progress = ProgressResolver.resolve_progress(problems, records)

    assert [p.problem_no for p in progress] == [3, 1, 2]
    assert [(p.accuracy, p.success) for p in progress] == [(0, False), (70, True), (100, True)]


def test_zero_accuracy_submission_still_counts_as_attempted():
    progress = ProgressResolver.resolve_progress([make_problem(1)], [make_record(1, 0)])
    assert progress[0].accuracy == 0
    assert progress[0].success is True


def test_overlay_uses_latest_code_regardless_of_input_order():
    templates = [make_template("PYTHON", "# py"), make_template("JAVA", "// java")]
    records = [
        make_record(2, code="second"),
        make_record(5, code="latest"),
        make_record(1, code="first"),
    ]

    base_codes = ProgressResolver.overlay_base_codes(templates, records)

    assert [(b.language, b.code) for b in base_codes] == [
        (Language.PYTHON, "latest"),
        (Language.JAVA, "// java"),
    ]


def test_latest_per_language_breaks_timestamp_ties_on_record_no():
    same = "2026-01-01 00:00:00.000000"
    records = [make_record(7, code="b", created_at=same), make_record(4, code="a", created_at=same)]
    assert ProgressResolver.latest_per_language(records)[Language.PYTHON].written_code == "b"
