"""Data models for the GitHub issue source."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zenhub_export.zenhub.models import PipelineReference


def _login(user: dict[str, Any] | None) -> str | None:
    """Extract the login from an optional GitHub user object."""
    if not user:
        return None
    login: str | None = user.get("login")
    return login


@dataclass
class Repository:
    """A GitHub repository descriptor.

    Attributes:
        id: Numeric GitHub repository ID (ZenHub boards are keyed by it).
        name: Short repository name, used in output file names.
        full_name: "owner/name".
    """

    id: int
    name: str
    full_name: str

    @classmethod
    def from_github(cls, data: dict[str, Any]) -> Repository:
        return cls(id=data["id"], name=data["name"], full_name=data["full_name"])


@dataclass
class Issue:
    """One GitHub issue, normalized for export.

    Core fields come from the GitHub payload and are not changed afterwards.
    The board fields (estimate, is_epic, position) keep their defaults until
    apply_board_data() copies them from the issue's ZenHub pipeline entry.

    Attributes:
        id: GitHub issue ID.
        html_url: Canonical web URL of the issue.
        number: Issue number, unique within the repository.
        title: Issue title.
        body: Issue description (empty string when GitHub has none).
        state: "open" or "closed".
        created_at: Creation timestamp as returned by GitHub.
        closed_at: Closing timestamp, if closed.
        labels: Label names in GitHub order.
        user: Login of the reporting user.
        assignee: Login of the assignee, if any.
        estimate: ZenHub estimate, if any.
        is_epic: Whether ZenHub flags the issue as an epic.
        position: Position in the ZenHub pipeline.
    """

    id: int
    html_url: str
    number: int
    title: str
    body: str
    state: str
    created_at: str
    closed_at: str | None = None
    labels: list[str] = field(default_factory=list)
    user: str | None = None
    assignee: str | None = None
    estimate: float | int | None = None
    is_epic: bool = False
    position: int = 0

    @classmethod
    def from_github(cls, data: dict[str, Any]) -> Issue:
        """Build an issue from a GitHub REST API issue payload."""
        labels = [label["name"] for label in data.get("labels") or [] if label.get("name")]
        return cls(
            id=data["id"],
            html_url=data["html_url"],
            number=data["number"],
            title=data.get("title") or "",
            body=data.get("body") or "",
            state=data.get("state") or "open",
            created_at=data.get("created_at") or "",
            closed_at=data.get("closed_at"),
            labels=labels,
            user=_login(data.get("user")),
            assignee=_login(data.get("assignee")),
        )

    def apply_board_data(self, reference: PipelineReference) -> None:
        """Copy ZenHub board metadata onto this issue, replacing prior values."""
        self.is_epic = reference.is_epic
        self.position = reference.position
        self.estimate = reference.estimate

    @property
    def is_bug(self) -> bool:
        return any(label.lower() == "bug" for label in self.labels)
