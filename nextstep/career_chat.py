"""
Career counselling chat on top of the LLM client.
"""

from __future__ import annotations
import logging
import textwrap
from dataclasses import dataclass, field
from typing import Dict, List

from nextstep.llm_client import ChatError, LLMClient, chat

logger = logging.getLogger(__name__)

CAREER_SYSTEM_PROMPT = textwrap.dedent(
    """\
You are NextStep AI, an expert career counselor and coach. Your role is to provide personalized career guidance, help users explore career paths, identify skill gaps, and offer actionable advice.

Key responsibilities:
1. Help users discover suitable career paths based on their skills, interests, and goals
2. Provide insights on industry trends and job market demands
3. Suggest specific skills to develop and learning resources
4. Offer resume and interview tips
5. Guide users on networking and professional development
6. Be encouraging but realistic about career transitions

Guidelines:
- Ask clarifying questions to understand the user's background and goals
- Provide specific, actionable advice rather than generic suggestions
- Consider the user's experience level and current situation
- Mention specific job titles, skills, and technologies when relevant
- Be supportive and motivating while being honest about challenges
- Keep responses concise but comprehensive (2-4 paragraphs typically)
- Use bullet points for lists of skills, steps, or recommendations

Remember: You're a career expert helping real people make important life decisions. Be thoughtful and personalized in your responses."""
)

SUGGESTED_PROMPTS = [
    "I'm a software developer looking to transition into AI/ML. What skills should I focus on?",
    "How do I negotiate a higher salary at my current job?",
    "What are the most in-demand skills for this year?",
    "I'm feeling stuck in my career. How do I find new motivation?",
    "Help me prepare for a product manager interview",
    "What career paths are good for someone who loves both tech and creativity?",
]


def send_message(history: List[Dict[str, str]], client: LLMClient | None = None,
                 model: str | None = None) -> str:
    """Reply to a user/assistant transcript, prefixed with the counsellor prompt."""
    messages = [{"role": "system", "content": CAREER_SYSTEM_PROMPT}]
    messages += [{"role": m["role"], "content": m["content"]} for m in history]
    return chat(messages, model=model, client=client)


@dataclass
class ChatSession:
    """Transcript owned by the caller; a failed turn leaves the user message in place."""

    messages: List[Dict[str, str]] = field(default_factory=list)
    error: str | None = None

    def ask(self, text: str, client: LLMClient | None = None) -> str | None:
        text = (text or "").strip()
        if not text:
            return None
        self.messages.append({"role": "user", "content": text})
        self.error = None
        try:
            reply = send_message(self.messages, client=client)
        except ChatError as exc:
            logger.warning("Career chat failed: %s", exc)
            self.error = str(exc) or "Failed to get response. Please try again."
            return None
        self.messages.append({"role": "assistant", "content": reply})
        return reply

    def clear(self) -> None:
        self.messages.clear()
        self.error = None
