from .llm import complete
from models import NO_ACTION_ITEMS
import re

SYS = (
    "You are an expert at identifying action items and tasks in emails. "
    "Be specific and actionable."
)

# One leading bullet and the whitespace after it.
BULLET = re.compile(r"^[•\-*][\s\ufeff]*")
# Surrounding whitespace, byte order marks included.
EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

def _trim(line: str) -> str:
    return EDGE_SPACE.sub("", line)

def build_prompt(subject: str, body: str) -> str:
    return (
        "Extract all action items from this email:\n\n"
        f"Subject: {subject}\n\n"
        f"Body:\n{body}\n\n"
        "List each action item as a separate bullet point. "
        f'If there are no clear action items, respond with "{NO_ACTION_ITEMS}"'
    )

def parse_action_items(raw: str) -> list:
    """Turn the model's bulleted text into a list of action item strings.

    Blank lines are dropped and one bullet is stripped when it is the first
    character of a line.
    The no-actions fallback sentence comes back as a one-item list.
    """
    actions = []
    for line in raw.split("\n"):
        if not _trim(line):
            continue
        line = _trim(BULLET.sub("", line, count=1))
        if line:
            actions.append(line)
    return actions

async def extract_actions(subject: str, body: str) -> list:
    raw = await complete(SYS, build_prompt(subject, body))
    return parse_action_items(raw)
