"""Exceptions raised by the Algolia API clients."""


class AlgoliaException(Exception):
    """Base class for every error raised by this package."""


class AlgoliaApiError(AlgoliaException):
    """The API answered with a non-retryable (4xx) status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"


class UnreachableHostsError(AlgoliaException):
    """Every host of the cluster failed, or the total timeout elapsed."""

    def __init__(self, hosts: list[str]):
        self.hosts = hosts
        tried = ", ".join(hosts) if hosts else "none"
        super().__init__(
            f"Unreachable hosts (tried: {tried}). "
            "Check your network connection and the application ID."
        )


class MissingObjectIdError(AlgoliaException, ValueError):
    """A record sent to an indexing operation has no objectID."""


class TaskTimeoutError(AlgoliaException):
    """A task did not reach the published state in the allowed time."""

    def __init__(self, task_id: int, attempts: int):
        self.task_id = task_id
        self.attempts = attempts
        super().__init__(
            f"Task {task_id} was not published after {attempts} attempts"
        )
