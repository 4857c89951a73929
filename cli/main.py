from __future__ import annotations

import argparse
import asyncio
import json
from typing import Any, Sequence

from app import JobApplyFacade
from domain.errors import BrowserProvisioningError
from domain.models import AppConfig
from domain.services import JobApplicationPipeline
from infra.browser import (
    KernelBrowserProvisioner,
    KernelBrowserSessionFactory,
    LocalBrowserSessionFactory,
)
from infra.config import FileSystemConfigProvider
from infra.http import UrlFileFetcher
from infra.llm import OpenAIChatClient
from infra.runtime import StructuredLogger, UuidIdGenerator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="job-apply")
    parser.add_argument("--config-dir", default="./config", help="Path to config folder")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Launch a local Chromium instead of a Kernel cloud browser",
    )
    parser.add_argument("--headless", action="store_true", default=True)
    parser.add_argument("--no-headless", dest="headless", action="store_false")
    sub = parser.add_subparsers(dest="command", required=True)

    apply_p = sub.add_parser("apply", help="Fill and submit a job application")
    apply_p.add_argument("url")
    apply_p.add_argument("--name", default="")
    apply_p.add_argument("--email", default="")
    apply_p.add_argument("--linkedin", default="")
    apply_p.add_argument("--phone")
    apply_p.add_argument("--resume-path")
    apply_p.add_argument("--resume-url")

    title_p = sub.add_parser("page-title", help="Print the title of a web page")
    title_p.add_argument("url")

    sub.add_parser("persisted-browser", help="Create a persisted cloud browser")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config_provider = FileSystemConfigProvider(args.config_dir)
    require_kernel = not args.local or args.command == "persisted-browser"
    errors = config_provider.validate(require_kernel=require_kernel)
    if args.command != "apply":
        # Only the apply pipeline talks to the LLM.
        errors = [e for e in errors if not e.startswith("OPENAI_KEY")]
    if errors:
        print("Config validation failed:")
        for err in errors:
            print(f"  - {err}")
        return 1

    facade = build_facade(config_provider.get_config(), local=args.local, headless=args.headless)

    if args.command == "apply":
        payload = {
            "url": args.url,
            "name": args.name,
            "email": args.email,
            "linkedin": args.linkedin,
            "phone": args.phone,
            "resumePath": args.resume_path,
            "resumeUrl": args.resume_url,
        }
        result = asyncio.run(facade.apply_to_job(payload))
        _print_json(result)
        return 0 if result["success"] else 1

    if args.command == "page-title":
        try:
            result = asyncio.run(facade.get_page_title({"url": args.url}))
        except (ValueError, BrowserProvisioningError) as exc:
            print(f"Error: {exc}")
            return 1
        _print_json(result)
        return 0

    if args.command == "persisted-browser":
        try:
            result = asyncio.run(facade.create_persisted_browser())
        except RuntimeError as exc:
            # BrowserProvisioningError included.
            print(f"Error: {exc}")
            return 1
        _print_json(result)
        return 0

    raise SystemExit(f"Unsupported command: {args.command}")


def build_facade(cfg: AppConfig, *, local: bool = False, headless: bool = True) -> JobApplyFacade:
    logger = StructuredLogger()
    ids = UuidIdGenerator()

    provisioner: KernelBrowserProvisioner | None = None
    if cfg.kernel_api_key:
        provisioner = KernelBrowserProvisioner(
            api_key=cfg.kernel_api_key,
            base_url=cfg.kernel_base_url,
        )

    if local or provisioner is None:
        session_factory: Any = LocalBrowserSessionFactory(headless=headless)
    else:
        session_factory = KernelBrowserSessionFactory(provisioner=provisioner, logger=logger)

    pipeline = JobApplicationPipeline(
        session_factory=session_factory,
        llm=OpenAIChatClient(
            api_key=cfg.openai_key,
            base_url=cfg.openai_base_url,
            model=cfg.openai_model,
        ),
        file_fetcher=UrlFileFetcher(),
        id_generator=ids,
        logger=logger,
        resume_staging_dir=cfg.resume_staging_dir,
        submission_timeout_ms=cfg.submission_timeout_ms,
    )
    return JobApplyFacade(
        pipeline=pipeline,
        session_factory=session_factory,
        provisioner=provisioner,
        id_generator=ids,
        logger=logger,
    )


def _print_json(data: dict[str, Any]) -> None:
    print(json.dumps(data, indent=2))


if __name__ == "__main__":
    raise SystemExit(main())
