from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Mapping

from domain.models import AppConfig

_DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
_DEFAULT_OPENAI_MODEL = "gpt-4o"
_DEFAULT_KERNEL_BASE_URL = "https://api.onkernel.com"
_DEFAULT_SUBMISSION_TIMEOUT_MS = 10_000

# config.json key -> environment variable consulted when the key is absent.
_ENV_FALLBACKS = {
    "KERNEL_API_KEY": "KERNEL_API_KEY",
    "KERNEL_BASE_URL": "KERNEL_BASE_URL",
    "OPENAI_KEY": "OPENAI_API_KEY",
    "OPENAI_BASE_URL": "OPENAI_BASE_URL",
    "OPENAI_MODEL": "OPENAI_MODEL",
    "SUBMISSION_TIMEOUT_MS": "SUBMISSION_TIMEOUT_MS",
    "RESUME_STAGING_DIR": "RESUME_STAGING_DIR",
}


class FileSystemConfigProvider:
    """Reads config.json from a config directory, falling back to the environment.

    Every public method re-reads from disk so that edits
    to the JSON file take effect without restarting the app.
    The file itself is optional: a deployment can rely on env vars only.
    """

    def __init__(self, config_dir: str, environ: Mapping[str, str] | None = None) -> None:
        self._config_dir = Path(config_dir)
        self._environ = os.environ if environ is None else environ

    def validate(self, *, require_kernel: bool = True) -> list[str]:
        errors: list[str] = []
        data = self._load(errors)
        if data is None:
            return errors

        if not self._lookup(data, "OPENAI_KEY"):
            errors.append("OPENAI_KEY is missing. Set it in config.json or export OPENAI_API_KEY.")
        if require_kernel and not self._lookup(data, "KERNEL_API_KEY"):
            errors.append("KERNEL_API_KEY is missing. Set it in config.json or export KERNEL_API_KEY.")

        for key in ("OPENAI_BASE_URL", "KERNEL_BASE_URL"):
            value = self._lookup(data, key)
            if value and not value.startswith(("https://", "http://")):
                errors.append(f"{key} must start with 'https://' or 'http://'.")

        timeout = self._lookup(data, "SUBMISSION_TIMEOUT_MS")
        if timeout is not None and not _is_positive_int(timeout):
            errors.append("SUBMISSION_TIMEOUT_MS must be a positive integer (milliseconds).")

        return errors

    def get_config(self) -> AppConfig:
        data = self._load([]) or {}
        timeout = self._lookup(data, "SUBMISSION_TIMEOUT_MS")
        return AppConfig(
            openai_key=self._lookup(data, "OPENAI_KEY") or "",
            kernel_api_key=self._lookup(data, "KERNEL_API_KEY"),
            openai_base_url=self._lookup(data, "OPENAI_BASE_URL") or _DEFAULT_OPENAI_BASE_URL,
            openai_model=self._lookup(data, "OPENAI_MODEL") or _DEFAULT_OPENAI_MODEL,
            kernel_base_url=self._lookup(data, "KERNEL_BASE_URL") or _DEFAULT_KERNEL_BASE_URL,
            submission_timeout_ms=int(timeout) if timeout else _DEFAULT_SUBMISSION_TIMEOUT_MS,
            resume_staging_dir=self._lookup(data, "RESUME_STAGING_DIR") or self.default_staging_dir(),
        )

    @staticmethod
    def default_staging_dir() -> str:
        return str(Path(tempfile.gettempdir()) / "job-apply")

    # -- internal helpers ---------------------------------------------------

    def _load(self, errors: list[str]) -> dict[str, Any] | None:
        """Parse config.json if present.

        Returns an empty dict when the file does not exist and None when
        it exists but cannot be read (the error is appended).
        """
        path = self._config_dir / "config.json"
        if not path.is_file():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            errors.append(f"Cannot read {path}: {exc}")
            return None
        if not isinstance(data, dict):
            errors.append(f"{path.name} must contain a JSON object.")
            return None
        return data

    def _lookup(self, data: Mapping[str, Any], key: str) -> str | None:
        value = data.get(key)
        if value is None or value == "":
            value = self._environ.get(_ENV_FALLBACKS[key]) or None
        return None if value is None else str(value)


def _is_positive_int(value: str) -> bool:
    try:
        return int(value) > 0
    except ValueError:
        return False
