from .llm import complete

SYS = (
    "You are an expert at writing professional email replies. "
    "Keep responses concise and appropriate."
)

def build_prompt(subject: str, body: str) -> str:
    return (
        "Generate a professional reply to this email:\n\n"
        f"Subject: {subject}\n\n"
        f"Body:\n{body}\n\n"
        "Write a brief, appropriate reply."
    )

async def quick_reply(subject: str, body: str) -> str:
    return await complete(SYS, build_prompt(subject, body))
