"""Task pane actions: read the open message, call the proxy, render the result.

Every handler takes the ``AddinContext`` built by ``on_ready``. Failures end
up in the error banner; nothing is retried.
"""
from dataclasses import dataclass
from typing import Optional

import httpx

from models import (
    SummarizeResponse,
    ActionsResponse,
    DraftResponse,
    ImproveResponse,
    ReplyResponse,
)
from .host import (
    Clipboard,
    HostError,
    HostType,
    ItemType,
    MailItem,
    get_email_body,
    get_email_subject,
    set_email_body,
    text_to_html,
)
from .render import (
    DRAFT,
    REPLY,
    SUMMARY,
    Notice,
    TaskPaneView,
    render_result,
    show_error,
    show_loading,
)

# Change this to your deployed backend URL
API_BASE_URL = "https://outlook-ai-addon.onrender.com/api"


class ProxyError(Exception):
    """The proxy answered with a non-success status."""


@dataclass
class HostInfo:
    host: HostType


@dataclass
class AddinContext:
    item: MailItem
    view: TaskPaneView
    http: httpx.AsyncClient
    clipboard: Optional[Clipboard] = None
    base_url: str = API_BASE_URL
    owns_http: bool = False

    async def aclose(self) -> None:
        """Close the HTTP client if on_ready created it."""
        if self.owns_http:
            await self.http.aclose()


def on_ready(info: HostInfo, item: MailItem, view: TaskPaneView = None,
             http: httpx.AsyncClient = None, clipboard: Clipboard = None,
             base_url: str = API_BASE_URL) -> Optional[AddinContext]:
    """Build the handler context once the host is ready; None outside Outlook."""
    if info.host != HostType.OUTLOOK:
        return None
    ctx = AddinContext(
        item=item,
        view=view or TaskPaneView(),
        http=http or httpx.AsyncClient(timeout=None),
        clipboard=clipboard,
        base_url=base_url,
        owns_http=http is None,
    )
    print("AI Email Assistant loaded successfully")
    return ctx


async def _post(ctx: AddinContext, path: str, payload: dict, failure: str) -> dict:
    r = await ctx.http.post(f"{ctx.base_url}/{path}", json=payload)
    if r.is_error:
        raise ProxyError(failure)
    return r.json()


async def summarize_email(ctx: AddinContext) -> Optional[SummarizeResponse]:
    try:
        show_loading(ctx.view)
        body = await get_email_body(ctx.item)
        subject = get_email_subject(ctx.item)
        data = await _post(ctx, "summarize", {"subject": subject, "body": body},
                           "Failed to summarize email")
        result = SummarizeResponse(**data)
        render_result(ctx.view, SUMMARY, result)
        return result
    except Exception as e:
        show_error(ctx.view, f"Error summarizing email: {e}", SUMMARY)


async def extract_actions(ctx: AddinContext) -> Optional[ActionsResponse]:
    try:
        show_loading(ctx.view)
        body = await get_email_body(ctx.item)
        subject = get_email_subject(ctx.item)
        data = await _post(ctx, "extract-actions", {"subject": subject, "body": body},
                           "Failed to extract actions")
        result = ActionsResponse(**data)
        render_result(ctx.view, SUMMARY, result)
        return result
    except Exception as e:
        show_error(ctx.view, f"Error extracting actions: {e}", SUMMARY)


async def draft_email(ctx: AddinContext) -> Optional[DraftResponse]:
    try:
        show_loading(ctx.view)
        instructions = ctx.view.draft_input
        tone = ctx.view.tone

        if not instructions:
            show_error(ctx.view, "Please enter what you want to say", DRAFT)
            return None

        data = await _post(ctx, "draft", {"instructions": instructions, "tone": tone},
                           "Failed to draft email")
        result = DraftResponse(**data)
        render_result(ctx.view, DRAFT, result)
        return result
    except Exception as e:
        show_error(ctx.view, f"Error drafting email: {e}", DRAFT)


async def improve_email(ctx: AddinContext) -> Optional[ImproveResponse]:
    try:
        show_loading(ctx.view)
        body = await get_email_body(ctx.item)

        if not body.strip():
            show_error(ctx.view, "No email content to improve. Please write a draft first.", DRAFT)
            return None

        data = await _post(ctx, "improve", {"content": body}, "Failed to improve email")
        result = ImproveResponse(**data)
        render_result(ctx.view, DRAFT, result)
        return result
    except Exception as e:
        show_error(ctx.view, f"Error improving email: {e}", DRAFT)


async def generate_quick_reply(ctx: AddinContext) -> Optional[ReplyResponse]:
    try:
        show_loading(ctx.view)
        body = await get_email_body(ctx.item)
        subject = get_email_subject(ctx.item)
        data = await _post(ctx, "quick-reply", {"subject": subject, "body": body},
                           "Failed to generate reply")
        result = ReplyResponse(**data)
        render_result(ctx.view, REPLY, result)
        return result
    except Exception as e:
        show_error(ctx.view, f"Error generating reply: {e}", REPLY)


async def insert_draft(ctx: AddinContext, content: str) -> None:
    try:
        await set_email_body(ctx.item, text_to_html(content))
        render_result(ctx.view, DRAFT, Notice("✓ Inserted into email!"))
    except Exception as e:
        show_error(ctx.view, f"Error inserting content: {e}", DRAFT)


async def insert_reply(ctx: AddinContext, content: str) -> None:
    try:
        # Compose mode: write straight into the body.
        if ctx.item.item_type == ItemType.MESSAGE and ctx.item.has_body:
            await set_email_body(ctx.item, text_to_html(content))
            render_result(ctx.view, REPLY, Notice("✓ Reply inserted!"))
        else:
            if ctx.clipboard is None:
                raise HostError("Clipboard is not available")
            await ctx.clipboard.write_text(content)
            render_result(ctx.view, REPLY,
                          Notice("✓ Reply copied to clipboard! Click Reply in Outlook and paste."))
    except Exception as e:
        show_error(ctx.view, f"Error inserting reply: {e}", REPLY)
