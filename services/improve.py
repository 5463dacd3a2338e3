from .llm import complete

SYS = (
    "You are an expert editor. "
    "Improve emails for clarity, professionalism, and conciseness. "
    "Fix grammar and style issues."
)

def build_prompt(content: str) -> str:
    return (
        "Improve this email draft by making it clearer, more concise, and more "
        "professional while maintaining the original intent:\n\n"
        f"{content}\n\n"
        "Provide the improved version."
    )

async def improve(content: str) -> str:
    return await complete(SYS, build_prompt(content))
