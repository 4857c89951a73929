from __future__ import annotations

from domain.models import ApplicationRequest

_REQUIRED_FIELDS = ("url", "name", "email", "linkedin")


def validate_application_request(request: ApplicationRequest) -> list[str]:
    """Return one message per missing required field; empty when valid."""
    errors: list[str] = []
    for name in _REQUIRED_FIELDS:
        value = getattr(request, name)
        if not value or not value.strip():
            errors.append(f"{name} is required")
    return errors
