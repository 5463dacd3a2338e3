from .llm import complete

SYS = (
    "You are an expert email writer. "
    "Write clear, professional emails in the specified tone. "
    "Keep emails concise but complete."
)

def build_prompt(instructions: str, tone: str) -> str:
    return (
        f"Write an email with a {tone} tone based on these instructions:\n\n"
        f"{instructions}\n\n"
        "Write a complete email including appropriate greeting and sign-off."
    )

async def draft(instructions: str, tone: str = "professional") -> str:
    return await complete(SYS, build_prompt(instructions, tone))
