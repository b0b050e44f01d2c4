# ChatGenerator: turns retrieved matches + a question into one completion.
# Accepts any model client exposing generate(messages, params) -> (text, meta).

from __future__ import annotations
import yaml
import os
from typing import List, Optional
from .types import Message, ChatResponse, ModelParams
from digital_twin.search.types import VectorMatch
from digital_twin.search.prompts import SYSTEM_PROMPT, build_context, build_user_prompt

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")


class ChatGenerator:
    def __init__(self, model_client, config_path: Optional[str] = DEFAULT_CONFIG_PATH):
        self.model_client = model_client
        self.config_path = config_path
        self.cfg = self._load_config()

    def _load_config(self) -> dict:
        if not self.config_path or not os.path.exists(self.config_path):
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @property
    def params(self) -> ModelParams:
        overrides = {k: self.cfg[k] for k in ("model", "temperature", "max_tokens") if k in self.cfg}
        return ModelParams(**overrides)

    def _compose_system_message(self) -> str:
        return (self.cfg.get("system_prompt") or SYSTEM_PROMPT).strip()

    def compose_messages(self, question: str, context: str) -> List[Message]:
        return [
            Message(role="system", content=self._compose_system_message()),
            Message(role="user", content=build_user_prompt(context, question)),
        ]

    def answer(self, question: str, matches: List[VectorMatch]) -> ChatResponse:
        """Build the context from `matches` (store order) and run one completion."""
        context = build_context(matches)
        messages = self.compose_messages(question, context)
        text, meta = self.model_client.generate(messages, self.params)
        return ChatResponse(text=text or "", context=context, meta=meta)
