import asyncio
import re

from domain.models import ApplicationRequest, DetectedField, FieldBinding, MatchStrategy
from domain.services import (
    FieldMapper,
    LabelLocator,
    PlaceholderLocator,
    locate_first,
    profile_field_bindings,
)
from domain.services.field_mapper import NAME_PATTERN
from test.fixtures import APPLICATION_URL, application_form
from test.mocks import FakeElement, FakePage, InMemoryLogger, el


def _page(doc: FakeElement) -> FakePage:
    page = FakePage({APPLICATION_URL: doc})
    asyncio.run(page.goto(APPLICATION_URL))
    return page


def _name_binding(optional: bool = False) -> FieldBinding:
    return FieldBinding(name="name", matcher=NAME_PATTERN, value="Ada Lovelace", optional=optional)


def test_wrapped_label_fills_nested_input() -> None:
    field = el("input", type="text")
    page = _page(el("body", el("label", field, text="Full Name")))
    report = asyncio.run(FieldMapper(logger=InMemoryLogger()).fill(page, [_name_binding()]))
    assert field.value == "Ada Lovelace"
    assert report.filled == ("name",)


def test_label_for_attribute_resolves_target() -> None:
    field = el("input", id="1-candidate-name")
    page = _page(el("body", el("label", text="Name", for_="1-candidate-name"), field))
    asyncio.run(FieldMapper(logger=InMemoryLogger()).fill(page, [_name_binding()]))
    assert field.value == "Ada Lovelace"


def test_placeholder_fallback_when_no_label_matches() -> None:
    field = el("input", placeholder="Your full name")
    page = _page(el("body", el("label", el("input"), text="Company"), field))
    report = asyncio.run(FieldMapper(logger=InMemoryLogger()).fill(page, [_name_binding()]))
    assert field.value == "Ada Lovelace"
    assert report.missing_required == ()


def test_unmatched_required_field_is_a_warning_not_an_error() -> None:
    logger = InMemoryLogger()
    page = _page(el("body", el("input", placeholder="Company")))
    report = asyncio.run(FieldMapper(logger=logger).fill(page, [_name_binding()]))
    assert report.missing_required == ("name",)
    assert "field_not_found" in logger.messages("warning")
    assert logger.messages("error") == []


def test_unmatched_optional_field_is_a_soft_notice() -> None:
    logger = InMemoryLogger()
    page = _page(el("body"))
    report = asyncio.run(FieldMapper(logger=logger).fill(page, [_name_binding(optional=True)]))
    assert report.missing_optional == ("name",)
    assert "optional_field_not_found" in logger.messages("info")
    assert logger.messages("warning") == []


def test_first_matching_label_wins() -> None:
    first = el("input")
    second = el("input")
    page = _page(
        el(
            "body",
            el("label", first, text="Full name"),
            el("label", second, text="Preferred name"),
        ),
    )
    asyncio.run(FieldMapper(logger=InMemoryLogger()).fill(page, [_name_binding()]))
    assert first.value == "Ada Lovelace"
    assert second.value is None


def test_label_with_dangling_for_moves_to_next_label() -> None:
    nested = el("input")
    page = _page(
        el(
            "body",
            el("label", text="Name", for_="missing"),
            el("label", nested, text="Full Name"),
        ),
    )
    detected = asyncio.run(locate_first([LabelLocator()], page, NAME_PATTERN))
    assert detected is not None
    assert detected.strategy is MatchStrategy.BY_WRAPPED_LABEL


def test_label_strategy_takes_priority_over_placeholder() -> None:
    by_label = el("input", id="n")
    by_placeholder = el("input", placeholder="name")
    page = _page(el("body", by_placeholder, el("label", text="Name", for_="n"), by_label))
    detected = asyncio.run(locate_first([LabelLocator(), PlaceholderLocator()], page, NAME_PATTERN))
    assert detected is not None
    assert detected.strategy is MatchStrategy.BY_LABEL


def test_profile_bindings_fill_standard_form() -> None:
    doc = application_form()
    page = _page(doc)
    request = ApplicationRequest(
        url=APPLICATION_URL,
        name="Ada Lovelace",
        email="ada@example.com",
        linkedin="https://linkedin.com/in/ada",
    )
    report = asyncio.run(FieldMapper(logger=InMemoryLogger()).fill(page, profile_field_bindings(request)))
    assert report.filled == ("name", "email", "linkedin")
    values = {n.attrs.get("type"): n.value for n in doc.descendants() if n.tag == "input"}
    assert values["text"] == "Ada Lovelace"
    assert values["email"] == "ada@example.com"
    assert values["url"] == "https://linkedin.com/in/ada"


def test_phone_binding_only_added_when_provided_and_optional() -> None:
    base = ApplicationRequest(url="u", name="n", email="e", linkedin="l")
    assert [b.name for b in profile_field_bindings(base)] == ["name", "email", "linkedin"]
    with_phone = ApplicationRequest(url="u", name="n", email="e", linkedin="l", phone="+1")
    phone = profile_field_bindings(with_phone)[-1]
    assert phone.name == "phone"
    assert phone.optional is True
    assert phone.matcher.search("Mobile number")


def test_patterns_are_case_insensitive() -> None:
    field = el("input")
    page = _page(el("body", el("label", field, text="FULL NAME")))
    binding = FieldBinding(name="name", matcher=re.compile(r"full name", re.IGNORECASE), value="Ada")
    asyncio.run(FieldMapper(logger=InMemoryLogger()).fill(page, [binding]))
    assert field.value == "Ada"


class _CountingStrategy:
    def __init__(self, controls: list[str]) -> None:
        self._controls = controls
        self.resolved: list[str] = []
        self.closed = False

    async def candidates(self, page, matcher):
        try:
            for control in self._controls:
                self.resolved.append(control)
                yield DetectedField(control, MatchStrategy.BY_LABEL, control)
        finally:
            self.closed = True


def test_locate_first_stops_at_first_candidate_and_closes_strategy() -> None:
    first = _CountingStrategy(["a", "b"])
    second = _CountingStrategy(["c"])

    detected = asyncio.run(locate_first([first, second], FakePage(), NAME_PATTERN))

    assert detected is not None
    assert detected.control == "a"
    assert first.resolved == ["a"]
    assert first.closed is True
    assert second.resolved == []


def test_locate_first_moves_to_next_strategy_when_one_is_empty() -> None:
    empty = _CountingStrategy([])
    fallback = _CountingStrategy(["c"])

    detected = asyncio.run(locate_first([empty, fallback], FakePage(), NAME_PATTERN))

    assert detected is not None
    assert detected.control == "c"
    assert empty.closed is True
