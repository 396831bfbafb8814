"""Shared pydantic models — the contract between jira.py, notify.py and main.py."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Atlassian Document Format (comment body)
# ---------------------------------------------------------------------------


class TextMark(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = "strong"


class TextNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str
    marks: list[TextMark] = []


class Paragraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["paragraph"] = "paragraph"
    content: list[TextNode]


class Document(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["doc"] = "doc"
    version: int = 1
    content: list[Paragraph]


class CommentPayload(BaseModel):
    """Request body for POST /rest/api/3/issue/{key}/comment."""

    model_config = ConfigDict(frozen=True)

    body: Document


# ---------------------------------------------------------------------------
# Run context and results
# ---------------------------------------------------------------------------


class RunContext(BaseModel):
    """What the CI event tells us: the branch and any pull request labels."""

    model_config = ConfigDict(frozen=True)

    branch: str
    labels: list[str] = []


class Delivered(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["delivered"] = "delivered"
    status_code: int


class Rejected(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rejected"] = "rejected"
    status_code: int
    body: str


class TransportFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["transport"] = "transport"
    message: str


DeliveryResult = Delivered | Rejected | TransportFailure

Outcome = Literal["skipped_no_key", "skipped_label", "delivered", "failed"]


class Report(BaseModel):
    """Terminal result of one invocation."""

    model_config = ConfigDict(frozen=True)

    outcome: Outcome
    detail: str
    issue_key: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome != "failed"
