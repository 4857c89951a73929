"""
Interchangeable strategies that locate a form control for a text criterion.

Each strategy yields candidate controls in document order. Strategies are
tried in a fixed priority and the first candidate yielded by any of them is
used; the remaining candidates of that strategy are never resolved.
"""

from __future__ import annotations

import re
from contextlib import aclosing
from typing import Any, AsyncGenerator, Protocol, Sequence

from domain.models import DetectedField, MatchStrategy

TEXT_CONTROLS = "input,textarea"
FILE_CONTROLS = 'input[type="file"]'


class ControlLocatorStrategy(Protocol):
    def candidates(self, page: Any, matcher: re.Pattern[str]) -> AsyncGenerator[DetectedField, None]:
        ...


class LabelLocator:
    """Matches ``<label>`` text, then resolves its ``for`` target or nested control.

    A label carrying a ``for`` attribute is only resolved through that id;
    the nested control is looked up for labels without one.
    """

    def __init__(self, *, control_selector: str = TEXT_CONTROLS, id_filter: str = "") -> None:
        self._control_selector = control_selector
        self._id_filter = id_filter

    async def candidates(self, page: Any, matcher: re.Pattern[str]) -> AsyncGenerator[DetectedField, None]:
        for label in await page.locator("label").all():
            text = (await label.text_content()) or ""
            if not matcher.search(text):
                continue
            target_id = await label.get_attribute("for")
            if target_id:
                control = page.locator(f'[id="{target_id}"]{self._id_filter}')
                if await control.count():
                    yield DetectedField(control.first, MatchStrategy.BY_LABEL, text.strip())
            else:
                control = label.locator(self._control_selector)
                if await control.count():
                    yield DetectedField(control.first, MatchStrategy.BY_WRAPPED_LABEL, text.strip())


class PlaceholderLocator:
    """Matches the ``placeholder`` attribute of inputs and textareas."""

    async def candidates(self, page: Any, matcher: re.Pattern[str]) -> AsyncGenerator[DetectedField, None]:
        controls = page.locator("input[placeholder],textarea[placeholder]")
        count = await controls.count()
        for index in range(count):
            control = controls.nth(index)
            placeholder = (await control.get_attribute("placeholder")) or ""
            if matcher.search(placeholder):
                yield DetectedField(control, MatchStrategy.BY_PLACEHOLDER, placeholder)


class FirstOfKindLocator:
    """Ignores the criterion and yields the first control matching a selector."""

    def __init__(self, selector: str) -> None:
        self._selector = selector

    async def candidates(self, page: Any, matcher: re.Pattern[str]) -> AsyncGenerator[DetectedField, None]:
        controls = page.locator(self._selector)
        if await controls.count():
            yield DetectedField(controls.first, MatchStrategy.FIRST_OF_KIND)


async def locate_first(
    strategies: Sequence[ControlLocatorStrategy],
    page: Any,
    matcher: re.Pattern[str],
) -> DetectedField | None:
    for strategy in strategies:
        async with aclosing(strategy.candidates(page, matcher)) as candidates:
            async for detected in candidates:
                return detected
    return None
