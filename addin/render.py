"""Task pane regions and result rendering.

Results are built as a markup tree with BeautifulSoup, so model output is
always escaped before it reaches the page.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from bs4 import BeautifulSoup

from models import (
    NO_ACTION_ITEMS,
    SummarizeResponse,
    ActionsResponse,
    DraftResponse,
    ImproveResponse,
    ReplyResponse,
)
from .host import append_lines

LOADING = "loading"
ERROR = "error"
SUMMARY = "summaryResult"
DRAFT = "draftResult"
REPLY = "replyResult"
RESULT_REGIONS = (SUMMARY, DRAFT, REPLY)

TONES = ("professional", "friendly", "formal", "casual")

INSERT_DRAFT = "insert-draft"
INSERT_REPLY = "insert-reply"


@dataclass
class Notice:
    """A short status line, e.g. after inserting text into the message."""
    message: str


Result = Union[SummarizeResponse, ActionsResponse, DraftResponse, ImproveResponse, ReplyResponse, Notice]


@dataclass
class Region:
    html: str = ""
    visible: bool = False

    @property
    def text(self) -> str:
        return BeautifulSoup(self.html, "html.parser").get_text()

    def soup(self) -> BeautifulSoup:
        return BeautifulSoup(self.html, "html.parser")


def _default_regions() -> Dict[str, Region]:
    return {name: Region() for name in (LOADING, ERROR) + RESULT_REGIONS}


@dataclass
class TaskPaneView:
    regions: Dict[str, Region] = field(default_factory=_default_regions)
    draft_input: str = ""
    tone: str = TONES[0]

    def __getitem__(self, name: str) -> Region:
        return self.regions[name]


def show_loading(view: TaskPaneView) -> None:
    view[LOADING].visible = True
    view[ERROR].visible = False


def hide_loading(view: TaskPaneView) -> None:
    view[LOADING].visible = False


def show_error(view: TaskPaneView, message: str, region: Optional[str] = None) -> None:
    """Show the error banner; ``region`` is the result region it replaces."""
    soup = BeautifulSoup("", "html.parser")
    soup.append(message)
    error = view[ERROR]
    error.html = soup.decode()
    error.visible = True
    if region is not None:
        view[region].visible = False
    hide_loading(view)


def _heading(soup, parent, text):
    strong = soup.new_tag("strong")
    strong.string = text
    parent.append(strong)
    parent.append(soup.new_tag("br"))


def _text_panel(soup, parent, heading, text, label, action):
    _heading(soup, parent, heading)
    parent.append(soup.new_tag("br"))
    div = soup.new_tag("div", attrs={"class": "result-text"})
    append_lines(soup, div, text)
    parent.append(div)
    parent.append(soup.new_tag("br"))
    button = soup.new_tag("button", attrs={"data-action": action, "data-content": text})
    button.string = label
    parent.append(button)


def has_no_actions(actions) -> bool:
    """True for an empty list or one holding only the no-actions sentence."""
    return not actions or list(actions) == [NO_ACTION_ITEMS]


def _build(soup: BeautifulSoup, result: Result) -> None:
    if isinstance(result, SummarizeResponse):
        _heading(soup, soup, "Summary:")
        append_lines(soup, soup, result.summary)
    elif isinstance(result, ActionsResponse):
        _heading(soup, soup, "Action Items:")
        if has_no_actions(result.actions):
            soup.append(NO_ACTION_ITEMS)
            return
        for i, action in enumerate(result.actions):
            if i:
                soup.append(soup.new_tag("br"))
            soup.append(f"• {action}")
    elif isinstance(result, DraftResponse):
        _text_panel(soup, soup, "Generated Email:", result.draft, "Insert into Email", INSERT_DRAFT)
    elif isinstance(result, ImproveResponse):
        _text_panel(soup, soup, "Improved Version:", result.improved, "Replace Email with This", INSERT_DRAFT)
    elif isinstance(result, ReplyResponse):
        _text_panel(soup, soup, "Suggested Reply:", result.reply, "Use This Reply", INSERT_REPLY)
    elif isinstance(result, Notice):
        strong = soup.new_tag("strong")
        strong.string = result.message
        soup.append(strong)
    else:
        raise TypeError(f"Cannot render {type(result).__name__}")


def render_result(view: TaskPaneView, region: str, result: Result) -> None:
    """Replace the content of a result region and make it the visible one."""
    soup = BeautifulSoup("", "html.parser")
    _build(soup, result)
    target = view[region]
    target.html = soup.decode()
    target.visible = True
    view[ERROR].visible = False
    hide_loading(view)
