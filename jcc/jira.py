"""Jira Cloud REST API v3 comment client."""

import base64

import httpx

from jcc.models import (
    CommentPayload,
    Delivered,
    DeliveryResult,
    Document,
    Paragraph,
    Rejected,
    TextMark,
    TextNode,
    TransportFailure,
)
from jcc.settings import JccSettings

COMMENT_PATH = "/rest/api/3/issue/{issue_key}/comment"


def basic_auth(email: str, token: str) -> str:
    """Return the Basic credential for email:token (standard Base64)."""
    return base64.b64encode(f"{email}:{token}".encode()).decode("ascii")


def build_comment(message: str) -> CommentPayload:
    """Wrap message in a one-paragraph ADF document with a single bold text node."""
    text = TextNode(text=message, marks=[TextMark(type="strong")])
    return CommentPayload(body=Document(content=[Paragraph(content=[text])]))


class JiraClient:
    def __init__(self, settings: JccSettings) -> None:
        self._base_url = settings.url
        self._auth = basic_auth(settings.email, settings.token.get_secret_value())

    def comment_url(self, issue_key: str) -> str:
        return f"{self._base_url}{COMMENT_PATH.format(issue_key=issue_key)}"

    async def add_comment(self, issue_key: str, payload: CommentPayload) -> DeliveryResult:
        """POST payload as a comment on issue_key.

        Exactly one request is made. 2xx is Delivered, any other status is
        Rejected (redirects are not followed), and transport errors come back as
        TransportFailure instead of being raised.
        """
        data = payload.model_dump_json().encode("utf-8")
        headers = {
            "Authorization": f"Basic {self._auth}",
            "Content-Type": "application/json",
            "Content-Length": str(len(data)),
        }
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(self.comment_url(issue_key), content=data, headers=headers)
        except httpx.HTTPError as exc:
            return TransportFailure(message=str(exc) or type(exc).__name__)

        if 200 <= response.status_code < 300:
            return Delivered(status_code=response.status_code)
        return Rejected(status_code=response.status_code, body=response.text)
