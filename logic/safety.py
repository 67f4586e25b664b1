"""Centralised prompts and guardrails for text-completion calls."""

from __future__ import annotations

from typing import List

GUARDRAIL_BULLETS: List[str] = [
    "Stay within wardrobe and styling advice.",
    "Never suggest an item the user already owns.",
    "Keep search terms short and searchable (2-4 words).",
    "Prefer practical, affordable fashion staples.",
    "Return only the requested JSON, without commentary.",
]

GAP_ANALYST_TASK = """Given a user's wardrobe and a generated outfit, identify 1-3 items that:
1. Would complete or elevate this specific outfit
2. Are NOT already in the user's wardrobe
3. Are practical, affordable fashion staples

Return ONLY a JSON array like:
[{"term": "white sneakers", "description": "A clean pair of white sneakers would complete this casual look"}]

If the outfit is already complete, return an empty array [].
Focus on accessories, shoes, or layers that would add to the outfit."""


def system_instruction(role_hint: str, task: str = "") -> str:
    """Compose a consistent system prompt with boundary reminders."""

    boundary_text = "\n".join(f"- {bullet}" for bullet in GUARDRAIL_BULLETS)
    prompt = f"You are a fashion {role_hint}.\nFollow these guardrails before responding:\n{boundary_text}"
    if task:
        prompt = f"{prompt}\n\n{task}"
    return prompt


def gap_analysis_prompts(occasion_label: str, outfit_summary: str, wardrobe_summary: str) -> tuple[str, str]:
    """Return the ``(system, user)`` prompt pair for wardrobe gap analysis."""

    user_prompt = (
        f"Occasion: {occasion_label}\n"
        f"Current outfit: {outfit_summary}\n"
        f"Full wardrobe: {wardrobe_summary}\n\n"
        "What items are missing to perfect this outfit?"
    )
    return system_instruction("wardrobe analyst", GAP_ANALYST_TASK), user_prompt


__all__ = ["system_instruction", "gap_analysis_prompts", "GUARDRAIL_BULLETS"]
