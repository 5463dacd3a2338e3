from .llm import complete

SYS = "You are an expert email assistant. Provide clear, concise summaries of emails."

def build_prompt(subject: str, body: str) -> str:
    return (
        "Please provide a concise summary of this email:\n\n"
        f"Subject: {subject}\n\n"
        f"Body:\n{body}\n\n"
        "Provide a 2-3 sentence summary highlighting the key points."
    )

async def summarize(subject: str, body: str) -> str:
    return await complete(SYS, build_prompt(subject, body))
