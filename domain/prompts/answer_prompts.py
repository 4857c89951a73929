"""Prompt builders for answering open-ended application questions."""

from __future__ import annotations

NOT_AVAILABLE = "Not available"


def build_open_ended_answer_prompt(*, job_description: str, question: str) -> str:
    """Build the single user message sent to the LLM for one question.

    An empty job description is replaced by an explicit marker so the
    model knows no context was scraped; an empty question label is sent
    as-is.
    """

    context = job_description.strip() or NOT_AVAILABLE
    return (
        "You are a world-class job applicant applying for a role.\n"
        "Based on the following job description, please provide a concise and "
        "professional answer to the application question.\n"
        "Your response must be plain text only, with no markdown formatting "
        "(like bolding or lists) and no em-dashes (—).\n"
        "\n"
        "Job Description:\n"
        "---\n"
        f"{context}\n"
        "---\n"
        "\n"
        f'Question: "{question}"\n'
        "\n"
        "Answer:"
    )
