# Client for Groq's hosted chat completions.
# Groq speaks the OpenAI wire format, so the OpenAI SDK is pointed at its base URL.
# One request per call: the SDK's automatic retries are switched off.

from typing import List, Tuple, Dict, Any, Optional
from openai import OpenAI
from digital_twin.settings import settings
from ..types import Message, ModelParams


class GroqClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[OpenAI] = None,
    ):
        self.api_key = api_key or settings.GROQ_API_KEY
        self.base_url = base_url or settings.GROQ_BASE_URL
        self._client = client

    @property
    def client(self) -> OpenAI:
        # built on first use so a missing key fails the call, not the app import
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key, base_url=self.base_url, max_retries=0)
        return self._client

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        resp = self.client.chat.completions.create(
            model=params.model,
            messages=formatted,
            temperature=params.temperature,
            max_tokens=params.max_tokens,
        )
        content = resp.choices[0].message.content if resp.choices else None
        meta = {"engine": "groq", "model": params.model}
        return (content or "").strip(), meta
