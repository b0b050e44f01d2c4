# Offline model client (USE_ECHO=1): no API call, answers with the question
# and the titles of the context blocks it was given, so a local run shows
# which profile chunks retrieval picked.

import re
from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams

_INFO_RE = re.compile(r"Your Information:\n(.*?)\n\nQuestion: (.*?)\n", re.DOTALL)


class EchoDevClient:
    model = "echo-dev"

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        prompt = next((m.content for m in reversed(messages) if m.role == "user"), "")
        m = _INFO_RE.search(prompt)
        if m:
            context, question = m.group(1), m.group(2)
            titles = [block.split(": ", 1)[0] for block in context.split("\n\n") if block.strip()]
        else:
            question, titles = prompt.strip(), []

        text = f"[ECHO] {question or '(no question)'}\nSources: {', '.join(titles) or '(none)'}"
        meta = {"engine": "echo", "model": self.model, "sources": titles, "max_tokens": params.max_tokens}
        return text, meta
