# Prompt fragments for the digital twin.
# Context blocks keep the order the store returned them in.

from typing import List

from .types import VectorMatch

SYSTEM_PROMPT = (
    "You are an AI digital twin. Answer questions as if you are the person, "
    "speaking in first person about your background, skills, and experience."
)

DEFAULT_TITLE = "Information"


def build_context(matches: List[VectorMatch]) -> str:
    blocks = []
    for m in matches:
        meta = m.metadata or {}
        title = meta.get("title") or DEFAULT_TITLE
        content = meta.get("content") or ""
        blocks.append(f"{title}: {content}")
    return "\n\n".join(blocks)


def build_user_prompt(context: str, question: str) -> str:
    return f"""Based on the following information about yourself, answer the question.
Speak in first person as if you are describing your own background.

Your Information:
{context}

Question: {question}

Provide a helpful, professional response:"""
