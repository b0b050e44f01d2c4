# Simple, typed dataclasses shared across generator modules.

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str


@dataclass
class ModelParams:
    """LLM parameters per request. config.yaml may override any of them."""
    model: str = "llama-3.1-8b-instant"
    temperature: float = 0.7
    max_tokens: int = 500


@dataclass
class ChatResponse:
    """Final response from the generator. `text` may be empty."""
    text: str
    context: str
    meta: Dict[str, Any]
