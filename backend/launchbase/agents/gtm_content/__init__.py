from .prompts import AGENT_PROMPTS, CONTENT_PROMPTS, QUICK_ACTIONS, STRATEGY_STEPS, build_content_prompt

__all__ = [
    "AGENT_PROMPTS",
    "CONTENT_PROMPTS",
    "QUICK_ACTIONS",
    "STRATEGY_STEPS",
    "build_content_prompt",
]
