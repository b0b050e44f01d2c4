# ============================================================
# MCP (JSON-RPC 2.0) adapter for the digital twin
# ------------------------------------------------------------
# One envelope in, one envelope out. Aliased method names are
# resolved through METHOD_ALIASES before the handler lookup.
# ============================================================

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from digital_twin import __version__
from digital_twin.log import get_logger

logger = get_logger("mcp")

JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "Digital Twin MCP Server"
SERVER_DESCRIPTION = "MCP server for AI-powered interview preparation using RAG"
TOOL_NAME = "digital_twin_query"

METHOD_ALIASES = {
    "list_tools": "tools/list",
    "digital_twin_query": "query",
}

INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class RpcError(Exception):
    """Protocol-level error; becomes the `error` member of the response."""

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def to_dict(self) -> Dict[str, Any]:
        err: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            err["data"] = self.data
        return err


def _envelope(req_id: Any, result: Any = None, error: Optional[RpcError] = None) -> Dict[str, Any]:
    if error is not None:
        return {"jsonrpc": JSONRPC_VERSION, "error": error.to_dict(), "id": req_id}
    return {"jsonrpc": JSONRPC_VERSION, "result": result, "id": req_id}


def _as_object(value: Any) -> Dict[str, Any]:
    """params / arguments that are not JSON objects carry no named fields."""
    return value if isinstance(value, dict) else {}


def _require_question(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise RpcError(INVALID_PARAMS, "Invalid params: question is required")
    return value


def status_descriptor() -> Dict[str, Any]:
    """Liveness payload served on GET, outside the RPC envelope."""
    return {
        "name": SERVER_NAME,
        "version": __version__,
        "description": SERVER_DESCRIPTION,
        "status": "running",
    }


def tool_descriptor(owner_name: Optional[str] = None) -> Dict[str, Any]:
    about = f" about {owner_name}" if owner_name else ""
    return {
        "name": TOOL_NAME,
        "description": (
            f"Query the digital twin for professional information{about}, "
            "including work experience, skills, education, and career background"
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "question": {
                    "type": "string",
                    "description": "The question to ask about professional background",
                },
            },
            "required": ["question"],
        },
    }


class McpDispatcher:
    def __init__(self, twin, owner_name: Optional[str] = None):
        self.twin = twin
        self.owner_name = owner_name
        self._handlers: Dict[str, Callable[[Dict[str, Any]], Any]] = {
            "initialize": self._initialize,
            "ping": self._ping,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
            "query": self._query,
        }

    # -------------------------
    # Entry points
    # -------------------------
    def dispatch(self, body: Any) -> Dict[str, Any]:
        req_id = None
        try:
            if not isinstance(body, dict):
                raise TypeError("Request body must be a JSON object")
            req_id = body.get("id")

            if body.get("jsonrpc") != JSONRPC_VERSION:
                return _envelope(req_id, error=RpcError(INVALID_REQUEST, "Invalid Request"))

            method = body.get("method")
            params = _as_object(body.get("params"))
            handler = None
            if isinstance(method, str):
                handler = self._handlers.get(METHOD_ALIASES.get(method, method))
            if handler is None:
                raise RpcError(METHOD_NOT_FOUND, f"Method not found: {method}")
            return _envelope(req_id, result=handler(params))
        except RpcError as e:
            return _envelope(req_id, error=e)
        except Exception as e:
            return self.internal_error(e)

    @staticmethod
    def internal_error(exc: Exception) -> Dict[str, Any]:
        """-32603 envelope; the request id is not trusted here and is always null."""
        logger.exception("MCP endpoint error", exc_info=exc)
        return _envelope(None, error=RpcError(INTERNAL_ERROR, "Internal error", data=str(exc)))

    # -------------------------
    # Handlers
    # -------------------------
    def _initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": SERVER_NAME, "version": __version__},
        }

    def _ping(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"status": "ok", "message": f"{SERVER_NAME} is running"}

    def _tools_list(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"tools": [tool_descriptor(self.owner_name)]}

    def _tools_call(self, params: Dict[str, Any]) -> Dict[str, Any]:
        name = params.get("name")
        if name != TOOL_NAME:
            raise RpcError(METHOD_NOT_FOUND, f"Unknown tool: {name}")
        args = _as_object(params.get("arguments"))
        question = _require_question(args.get("question"))

        result = self.twin.query(question)
        return {"content": [{"type": "text", "text": result.response or "No response available"}]}

    def _query(self, params: Dict[str, Any]) -> Dict[str, Any]:
        question = params.get("question") or _as_object(params.get("arguments")).get("question")
        question = _require_question(question)
        return self.twin.query(question).to_dict()
