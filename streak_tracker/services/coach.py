# streak_tracker/services/coach.py
import logging
from typing import Optional

import openai
from openai import AsyncOpenAI

from streak_tracker.config import settings

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "I can't coach you right now, but that's no excuse to stop working toward your goal!"
EMPTY_REPLY = "Stop making excuses and get to work!"

SYSTEM_PROMPT = (
    'You are a brutal, no-nonsense motivational coach. The user is working toward this goal: "{goal}". '
    "Your job is to give tough love, call out excuses, and push them to take action. "
    "Be direct, firm, and motivating without being mean or discouraging. "
    "Focus on action and accountability. Keep responses under 100 words."
)

_client: Optional[AsyncOpenAI] = None


def get_openai_client() -> Optional[AsyncOpenAI]:
    """Lazily built client; None when no API key is configured."""
    global _client
    key = (settings.OPENAI_API_KEY or "").strip()
    if not key:
        return None
    if _client is None:
        _client = AsyncOpenAI(api_key=key)
    return _client


class CoachService:
    def __init__(self, client: Optional[AsyncOpenAI] = None, model: Optional[str] = None):
        self.client = client
        self.model = model or settings.OPENAI_MODEL

    async def reply(self, message: str, goal_name: str) -> str:
        """Never raises: any provider problem yields a canned reply."""
        if self.client is None:
            logger.warning("Coach unavailable: no OpenAI API key configured")
            return FALLBACK_REPLY

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT.format(goal=goal_name)},
                    {"role": "user", "content": message},
                ],
                max_tokens=150,
                temperature=0.8,
            )
        except openai.OpenAIError as e:
            logger.warning("Coach request failed: %s", e)
            return FALLBACK_REPLY

        content = response.choices[0].message.content if response.choices else None
        return (content or "").strip() or EMPTY_REPLY
