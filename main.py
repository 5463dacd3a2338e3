# main.py
from dotenv import load_dotenv
load_dotenv()   # <-- Must be first!
import os
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from models import (
    SummarizeRequest, SummarizeResponse,
    ActionsRequest, ActionsResponse,
    DraftRequest, DraftResponse,
    ImproveRequest, ImproveResponse,
    ReplyRequest, ReplyResponse,
    ErrorResponse, HealthResponse,
)
from services import llm
from services.summarize import summarize
from services.actions import extract_actions
from services.draft import draft
from services.improve import improve
from services.reply import quick_reply

APP_NAME = "AI Email Assistant Backend"
PORT = int(os.getenv("PORT", "3001"))
ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]

app = FastAPI(title=APP_NAME)

ERRORS = {500: {"model": ErrorResponse}}

def error_response(label: str, e: Exception) -> JSONResponse:
    print(f"🚨 {label} error:", e)
    return JSONResponse({"error": str(e)}, status_code=500)

# ------------- CORS -------------
# The add-in task pane is served from its own origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
# ------------------------------------------------

@app.post("/api/summarize", response_model=SummarizeResponse, responses=ERRORS)
async def summarize_email(req: SummarizeRequest):
    try:
        summary = await summarize(req.subject, req.body)
        return {"summary": summary}
    except Exception as e:
        return error_response("Summarize", e)

@app.post("/api/extract-actions", response_model=ActionsResponse, responses=ERRORS)
async def extract_email_actions(req: ActionsRequest):
    try:
        actions = await extract_actions(req.subject, req.body)
        return {"actions": actions}
    except Exception as e:
        return error_response("Extract actions", e)

@app.post("/api/draft", response_model=DraftResponse, responses=ERRORS)
async def draft_email(req: DraftRequest):
    try:
        text = await draft(req.instructions, req.tone)
        return {"draft": text}
    except Exception as e:
        return error_response("Draft", e)

@app.post("/api/improve", response_model=ImproveResponse, responses=ERRORS)
async def improve_email(req: ImproveRequest):
    try:
        improved = await improve(req.content)
        return {"improved": improved}
    except Exception as e:
        return error_response("Improve", e)

@app.post("/api/quick-reply", response_model=ReplyResponse, responses=ERRORS)
async def quick_reply_email(req: ReplyRequest):
    try:
        reply = await quick_reply(req.subject, req.body)
        return {"reply": reply}
    except Exception as e:
        return error_response("Quick reply", e)

@app.get("/api/health", response_model=HealthResponse)
def health():
    return {"status": "ok", "apiKeyConfigured": bool(llm.GEMINI_API_KEY)}

@app.get("/")
def root():
    return {"status": "running", "app": APP_NAME}

if __name__ == "__main__":
    import uvicorn

    print(f"✅ Backend server running on http://localhost:{PORT}")
    print(f"API Key configured: {bool(llm.GEMINI_API_KEY)}")
    if not llm.GEMINI_API_KEY:
        print("\n⚠️  WARNING: No API key found. Add GEMINI_API_KEY to your .env file\n")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
