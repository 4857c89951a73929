from __future__ import annotations

from typing import Any, Sequence

from domain.models import AnswerReport, OpenEndedQuestion
from domain.ports import LLMClientPort, LoggerPort
from domain.prompts import build_open_ended_answer_prompt

EM_DASH = "—"


class OpenEndedQuestionExtractor:
    """Finds visible textareas and the question text that labels them."""

    def __init__(self, *, logger: LoggerPort) -> None:
        self._logger = logger

    async def extract(self, page: Any) -> list[OpenEndedQuestion]:
        questions: list[OpenEndedQuestion] = []
        textareas = page.locator("textarea")
        count = await textareas.count()
        for index in range(count):
            textarea = textareas.nth(index)
            if not await textarea.is_visible():
                continue
            label = await self._resolve_label(page, textarea)
            questions.append(OpenEndedQuestion(label=label, control=textarea))

        self._logger.info(
            "open_ended_questions_detected",
            count=len(questions),
            labels=[q.label for q in questions],
        )
        return questions

    async def _resolve_label(self, page: Any, textarea: Any) -> str:
        # label[for=id], then a wrapping label, then the previous sibling.
        control_id = await textarea.get_attribute("id")
        if control_id:
            label = page.locator(f'label[for="{control_id}"]')
            if await label.count():
                text = await _text_of(label.first)
                if text:
                    return text

        wrapper = textarea.locator("xpath=ancestor::label").first
        if await wrapper.count():
            text = await _text_of(wrapper)
            if text:
                return text

        previous = textarea.locator("xpath=preceding-sibling::*[1]")
        if await previous.count():
            return await _text_of(previous.first)
        return ""


async def _text_of(locator: Any) -> str:
    return ((await locator.text_content()) or "").strip()


class AnswerGenerator:
    """Generates and fills an answer for every open-ended question.

    Each question is isolated: an LLM error or an empty answer leaves that
    control blank and moves on to the next question.
    """

    def __init__(
        self,
        *,
        llm: LLMClientPort,
        logger: LoggerPort,
        max_tokens: int = 250,
        temperature: float = 0.7,
    ) -> None:
        self._llm = llm
        self._logger = logger
        self._max_tokens = max_tokens
        self._temperature = temperature

    async def generate(self, question: str, job_description: str) -> str:
        prompt = build_open_ended_answer_prompt(
            job_description=job_description,
            question=question,
        )
        answer = await self._llm.complete(
            prompt,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )
        return (answer or "").strip().replace(EM_DASH, "-")

    async def answer_all(
        self,
        questions: Sequence[OpenEndedQuestion],
        job_description: str,
    ) -> AnswerReport:
        answered: list[str] = []
        failed: list[str] = []
        for question in questions:
            self._logger.info("generating_answer", question=question.label)
            try:
                answer = await self.generate(question.label, job_description)
                if not answer:
                    self._logger.warning("empty_answer_generated", question=question.label)
                    failed.append(question.label)
                    continue
                await question.control.fill(answer)
            except Exception as exc:
                self._logger.error(
                    "answer_generation_failed",
                    question=question.label,
                    error=str(exc),
                )
                failed.append(question.label)
                continue
            answered.append(question.label)
            self._logger.info("answer_filled", question=question.label)
        return AnswerReport(answered=tuple(answered), failed=tuple(failed))
