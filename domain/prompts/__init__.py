"""Prompt templates for the LLM answer generator."""

from .answer_prompts import NOT_AVAILABLE, build_open_ended_answer_prompt  # noqa: F401

__all__ = [
    "NOT_AVAILABLE",
    "build_open_ended_answer_prompt",
]
