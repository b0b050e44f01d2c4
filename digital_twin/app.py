# ============================================================
# Digital Twin FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Upstash Vector for retrieval, Groq (or Echo) for generation
#   - /api/chat for the site's chat widget
#   - /api/mcp for external assistants (JSON-RPC 2.0)
#   - /api/load to push profile chunks into the index
# ============================================================

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel
from typing import Any, Dict, List, Optional
from functools import lru_cache

# --- Local imports ---
from digital_twin import __version__
from digital_twin.settings import settings
from digital_twin.search import UpstashVectorStore
from digital_twin.generate import ChatGenerator, EchoDevClient
from digital_twin.generate.clients.groq_client import GroqClient
from digital_twin.twin import DigitalTwin
from digital_twin.mcp import McpDispatcher, status_descriptor


# ------------------------------------------------------------
# 🔧 Collaborators (overridable via app.dependency_overrides)
# ------------------------------------------------------------
def build_model_client():
    if settings.USE_ECHO:
        return EchoDevClient()
    return GroqClient()


@lru_cache(maxsize=1)
def get_twin() -> DigitalTwin:
    return DigitalTwin(
        store=UpstashVectorStore(),
        generator=ChatGenerator(model_client=build_model_client()),
    )


def get_dispatcher(twin: DigitalTwin = Depends(get_twin)) -> McpDispatcher:
    return McpDispatcher(twin, owner_name=settings.OWNER_NAME)


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Digital Twin API", version=__version__)

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatRequest(BaseModel):
    question: str


class SourcePayload(BaseModel):
    title: Optional[str] = None
    score: float


class ChatPayload(BaseModel):
    success: bool
    response: str
    sources: Optional[List[SourcePayload]] = None


class LoadPayload(BaseModel):
    success: bool
    message: str
    count: Optional[int] = None

# ------------------------------------------------------------
# 💬 Chat widget route
# ------------------------------------------------------------
@app.post("/api/chat", response_model=ChatPayload, response_model_exclude_unset=True)
def chat(req: ChatRequest, twin: DigitalTwin = Depends(get_twin)):
    if not req.question.strip():
        raise HTTPException(status_code=422, detail="question is required")
    return twin.query(req.question).to_dict()

# ------------------------------------------------------------
# 🔌 MCP endpoint
# ------------------------------------------------------------
@app.post("/api/mcp")
async def mcp(request: Request, dispatcher: McpDispatcher = Depends(get_dispatcher)):
    try:
        body = await request.json()
    except ValueError as e:
        return dispatcher.internal_error(e)
    # dispatch makes blocking network calls
    return await run_in_threadpool(dispatcher.dispatch, body)


@app.get("/api/mcp")
def mcp_status():
    return status_descriptor()

# ------------------------------------------------------------
# 📥 Data loading
# ------------------------------------------------------------
@app.post("/api/load", response_model=LoadPayload, response_model_exclude_unset=True)
def load(profile: Dict[str, Any], twin: DigitalTwin = Depends(get_twin)):
    return twin.load(profile).to_dict()


@app.get("/api/vector-info")
def vector_info(twin: DigitalTwin = Depends(get_twin)):
    return twin.vector_info()

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
    }


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}


@app.get("/")
def hello():
    return {"message": f"{settings.app_name} service running."}
