from codeython_api.app.core.db import get_connection
from codeython_api.app.schemas.problem import ProblemCreate


def count_rows(table: str, **where) -> int:
    conn = get_connection()
    try:
        clause = " AND ".join(f"{column} = ?" for column in where) or "1 = 1"
        row = conn.execute(
            f"SELECT COUNT(*) AS count FROM {table} WHERE {clause}", tuple(where.values())
        ).fetchone()
        return row["count"]
    finally:
        conn.close()


def touch_record(record_no: int, updated_at: str) -> None:
    conn = get_connection()
    try:
        conn.execute("UPDATE records SET updated_at = ? WHERE record_no = ?", (updated_at, record_no))
        conn.commit()
    finally:
        conn.close()


def problem_payload(title: str = "Two Sum", languages=("PYTHON", "JAVA"), testcases: int = 2) -> ProblemCreate:
    return ProblemCreate(
        title=title,
        content="Return the indices of the two numbers that add up to the target.",
        limit_factor=2,
        limit_time=1000,
        difficulty=2,
        type=["array", "hash"],
        base_codes=[{"language": lang, "code": f"// {lang} starter"} for lang in languages],
        testcases=[
            {"input_case": f"{i} {i + 1}", "output_case": str(2 * i + 1), "description": f"case {i}"}
            for i in range(testcases)
        ],
    )
