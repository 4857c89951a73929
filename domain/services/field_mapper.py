from __future__ import annotations

import re
from typing import Any, Sequence

from domain.models import ApplicationRequest, FieldBinding, FieldMappingReport
from domain.ports import LoggerPort
from domain.services.control_locators import (
    ControlLocatorStrategy,
    LabelLocator,
    PlaceholderLocator,
    locate_first,
)

NAME_PATTERN = re.compile(r"name|full name", re.IGNORECASE)
EMAIL_PATTERN = re.compile(r"email", re.IGNORECASE)
LINKEDIN_PATTERN = re.compile(r"linkedin", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"phone|mobile", re.IGNORECASE)


def profile_field_bindings(request: ApplicationRequest) -> list[FieldBinding]:
    bindings = [
        FieldBinding(name="name", matcher=NAME_PATTERN, value=request.name),
        FieldBinding(name="email", matcher=EMAIL_PATTERN, value=request.email),
        FieldBinding(name="linkedin", matcher=LINKEDIN_PATTERN, value=request.linkedin),
    ]
    if request.phone:
        bindings.append(
            FieldBinding(name="phone", matcher=PHONE_PATTERN, value=request.phone, optional=True),
        )
    return bindings


class FieldMapper:
    """Fills applicant profile values into detected form controls.

    Bindings are processed in order; for each one the label strategy is
    tried before the placeholder strategy and the first hit is filled.
    A binding that finds no control is skipped without failing the run.
    """

    def __init__(
        self,
        *,
        logger: LoggerPort,
        strategies: Sequence[ControlLocatorStrategy] | None = None,
    ) -> None:
        self._logger = logger
        self._strategies = tuple(strategies or (LabelLocator(), PlaceholderLocator()))

    async def fill(self, page: Any, bindings: Sequence[FieldBinding]) -> FieldMappingReport:
        filled: list[str] = []
        missing_required: list[str] = []
        missing_optional: list[str] = []

        for binding in bindings:
            detected = await locate_first(self._strategies, page, binding.matcher)
            if detected is None:
                if binding.optional:
                    self._logger.info("optional_field_not_found", field=binding.name)
                    missing_optional.append(binding.name)
                else:
                    self._logger.warning(
                        "field_not_found",
                        field=binding.name,
                        pattern=binding.matcher.pattern,
                    )
                    missing_required.append(binding.name)
                continue

            await detected.control.fill(binding.value)
            filled.append(binding.name)
            self._logger.info(
                "field_filled",
                field=binding.name,
                strategy=detected.strategy.value,
                matched_text=detected.matched_text,
            )

        return FieldMappingReport(
            filled=tuple(filled),
            missing_required=tuple(missing_required),
            missing_optional=tuple(missing_optional),
        )
