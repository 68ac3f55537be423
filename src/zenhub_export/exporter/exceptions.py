"""Custom exceptions for the Exporter."""


class ExportError(Exception):
    """A fetch failed and the export run was aborted.

    Attributes:
        repository: Name of the repository being exported.
        stage: Which fetch failed ("repository", "board", or "issues").
    """

    def __init__(self, repository: str, stage: str, message: str) -> None:
        super().__init__(f"[{repository}] {stage} fetch failed: {message}")
        self.repository = repository
        self.stage = stage
