"""Fake job-board documents shared by unit and integration tests."""

from __future__ import annotations

from test.mocks.fake_page import FakeElement, FakePage, el

JOB_URL = "https://jobs.example.com/acme/role-1"
APPLICATION_URL = f"{JOB_URL}/application"
SUBMITTED_URL = f"{APPLICATION_URL}/submitted"
JOB_DESCRIPTION = "Acme is hiring a backend engineer to build distributed systems."


def job_page(description: str = JOB_DESCRIPTION) -> FakeElement:
    return el(
        "body",
        el("header", text="Acme Careers"),
        el("div", el("p", text=description), data_ashby_body="true"),
    )


def application_form(
    *,
    with_resume_input: bool = True,
    with_question: bool = True,
    with_submit: bool = True,
) -> FakeElement:
    """An Ashby-style form: for-labels, a wrapping label, a resume input,
    one open-ended question and a submit button."""
    form = el(
        "form",
        el("label", text="Full Name", for_="_systemfield_name"),
        el("input", id="_systemfield_name", type="text"),
        el("label", text="Email", for_="_systemfield_email"),
        el("input", id="_systemfield_email", type="email"),
        el("label", el("input", type="url"), text="LinkedIn Profile"),
    )
    if with_resume_input:
        form.append(el("label", text="Resume", for_="_systemfield_resume"))
        form.append(el("input", id="_systemfield_resume", type="file"))
    if with_question:
        form.append(el("label", text="Why do you want to work at Acme?", for_="why-acme"))
        form.append(el("textarea", id="why-acme"))
    if with_submit:
        form.append(el("button", text="Submit Application", type="submit"))
    return el("body", form)


def submit_button(document: FakeElement) -> FakeElement:
    for node in document.descendants():
        if node.tag == "button":
            return node
    raise LookupError("form has no submit button")


def ashby_page(form: FakeElement | None = None, *, on_submit: str = "navigate") -> FakePage:
    """Job page plus application form wired to a submit behaviour.

    ``on_submit``: ``navigate`` to the confirmation URL, ``alert`` to show an
    inline validation error, ``thanks`` to render a success message in place,
    or ``nothing``.
    """
    form = form or application_form()
    page = FakePage({JOB_URL: job_page(), APPLICATION_URL: form}, title="Acme - Backend Engineer")

    def handle_submit() -> None:
        if on_submit == "navigate":
            page.navigate(SUBMITTED_URL)
        elif on_submit == "alert":
            form.append(el("div", text="Email is required", role="alert"))
        elif on_submit == "thanks":
            form.append(el("h2", text="Thank you for your application!"))

    for node in form.descendants():
        if node.tag == "button":
            node.on_click = handle_submit
    return page
