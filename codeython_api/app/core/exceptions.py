"""
Error taxonomy for the service layer.

Services raise these synchronously; the endpoints translate them into
HTTP responses.  Nothing in the service layer retries or degrades to a
partial result.
"""


class CodeythonError(Exception):
    """Base class for business-rule failures raised by services."""


class DuplicateTitleError(CodeythonError):
    """A problem with the same title already exists."""

    def __init__(self, title: str):
        super().__init__(f"Problem title already exists: {title}")
        self.title = title


class ProblemNotFoundError(CodeythonError):
    """The requested problem number does not exist."""

    def __init__(self, problem_no: int):
        super().__init__(f"Problem {problem_no} not found")
        self.problem_no = problem_no


class MemberNotFoundError(CodeythonError):
    """No member is registered under the given username."""

    def __init__(self, username: str):
        super().__init__(f"Member {username} not found")
        self.username = username


class DuplicateUsernameError(CodeythonError):
    def __init__(self, username: str):
        super().__init__(f"Username already taken: {username}")
        self.username = username


class UnsupportedLanguageError(CodeythonError):
    """The problem has no base code template for the submitted language."""

    def __init__(self, problem_no: int, language: str):
        super().__init__(f"Problem {problem_no} does not support language {language}")
        self.problem_no = problem_no
        self.language = language
