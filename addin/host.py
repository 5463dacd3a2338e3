"""Mail host abstraction used by the task pane.

The host exposes the open message through ``MailItem``. Body reads and
writes are coroutines returning an ``AsyncResult`` so callers await a
single outcome rather than registering callbacks.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from bs4 import BeautifulSoup, NavigableString


class HostType(str, Enum):
    OUTLOOK = "Outlook"
    WORD = "Word"
    EXCEL = "Excel"


class ItemType(str, Enum):
    MESSAGE = "message"
    APPOINTMENT = "appointment"


class CoercionType(str, Enum):
    TEXT = "text"
    HTML = "html"


class AsyncResultStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class HostError(Exception):
    """Error reported by the mail host for a failed body operation."""

    def __init__(self, message: str, code: Optional[int] = None, name: str = "HostError"):
        super().__init__(message)
        self.message = message
        self.code = code
        self.name = name


@dataclass
class AsyncResult:
    status: AsyncResultStatus
    value: Any = None
    error: Optional[HostError] = None

    @classmethod
    def succeeded(cls, value=None):
        return cls(AsyncResultStatus.SUCCEEDED, value=value)

    @classmethod
    def failed(cls, error: HostError):
        return cls(AsyncResultStatus.FAILED, error=error)


class MailItem(ABC):
    """The message currently open in the host."""

    subject: Optional[str] = None
    item_type: ItemType = ItemType.MESSAGE
    has_body: bool = True

    @abstractmethod
    async def get_body(self, coercion: CoercionType = CoercionType.TEXT) -> AsyncResult:
        ...

    @abstractmethod
    async def set_body(self, content: str, coercion: CoercionType = CoercionType.HTML) -> AsyncResult:
        ...


class Clipboard(ABC):
    @abstractmethod
    async def write_text(self, text: str) -> None:
        ...


def get_email_subject(item: MailItem) -> str:
    return item.subject or ""


async def get_email_body(item: MailItem) -> str:
    result = await item.get_body(CoercionType.TEXT)
    if result.status != AsyncResultStatus.SUCCEEDED:
        raise result.error or HostError("Could not read the email body")
    return result.value or ""


async def set_email_body(item: MailItem, html: str) -> None:
    result = await item.set_body(html, CoercionType.HTML)
    if result.status != AsyncResultStatus.SUCCEEDED:
        raise result.error or HostError("Could not write the email body")


def append_lines(soup: BeautifulSoup, parent, text: str) -> None:
    """Append text to parent as escaped strings separated by <br> tags."""
    for i, line in enumerate(text.split("\n")):
        if i:
            parent.append(soup.new_tag("br"))
        parent.append(NavigableString(line))


def text_to_html(text: str) -> str:
    """Escape plain text and turn its newlines into <br> tags."""
    soup = BeautifulSoup("", "html.parser")
    append_lines(soup, soup, text)
    return soup.decode()
