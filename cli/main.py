from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from typing import Sequence

from app import TrackerFacade, format_date
from domain.errors import ApplicationValidationError
from domain.models import ApplicationDraft, JobStatus, TrackerConfig
from domain.ports import ConfirmationPort, KeyValueStoragePort
from domain.services import ALL, ApplicationStore
from infra.config import FileSystemConfigProvider
from infra.interaction import ConsoleConfirmation
from infra.persistence import (
    ApplicationPersistence,
    JsonFileKeyValueStorage,
    SQLiteKeyValueStorage,
)
from infra.persistence.json_file_storage import SAFE_KEY_PATTERN
from infra.runtime import StructuredLogger, SystemClock, TimestampIdGenerator

_STATUS_CHOICES = [s.value for s in JobStatus]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="job-tracker")
    parser.add_argument("--config-dir", default="./config", help="Path to config folder")
    parser.add_argument("--storage-backend", choices=["json", "sqlite"], default=None)
    parser.add_argument("--storage-path", default=None)
    sub = parser.add_subparsers(dest="command", required=True)

    add_p = sub.add_parser("add", help="Track a new application")
    add_p.add_argument("--company", required=True)
    add_p.add_argument("--title", required=True)
    add_p.add_argument("--date", required=True, help="Date applied (YYYY-MM-DD)")
    add_p.add_argument("--link", default="")
    add_p.add_argument("--notes", default="")

    list_p = sub.add_parser("list", help="List tracked applications")
    list_p.add_argument("--status", choices=[ALL, *_STATUS_CHOICES], default=ALL)

    status_p = sub.add_parser("set-status", help="Change the status of an application")
    status_p.add_argument("application_id")
    status_p.add_argument("status", choices=_STATUS_CHOICES)

    delete_p = sub.add_parser("delete", help="Delete an application")
    delete_p.add_argument("application_id")
    delete_p.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    sub.add_parser("check-config", help="Validate config.json")
    return parser


def main(
    argv: Sequence[str] | None = None,
    confirmation: ConfirmationPort | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    config_provider = FileSystemConfigProvider(args.config_dir)

    errors = config_provider.validate()
    if args.command == "check-config":
        if errors:
            print("Config validation failed:")
            for err in errors:
                print(f"  - {err}")
            return 1
        cfg = config_provider.get_config()
        print(f"Config OK: backend={cfg.storage_backend}, path={cfg.storage_path}, key={cfg.storage_key}")
        return 0

    if errors:
        print("Config validation failed:", file=sys.stderr)
        for err in errors:
            print(f"  - {err}", file=sys.stderr)
        return 1

    cfg = _apply_overrides(config_provider.get_config(), args)
    if cfg.storage_backend == "json" and not SAFE_KEY_PATTERN.match(cfg.storage_key):
        print(f"error: storage_key '{cfg.storage_key}' cannot be used with the json backend", file=sys.stderr)
        return 1
    logger = StructuredLogger(min_level=cfg.log_level)

    with ExitStack() as stack:
        storage = _open_storage(cfg, stack)
        persistence = ApplicationPersistence(storage, logger, key=cfg.storage_key)
        store = ApplicationStore(
            persistence=persistence,
            id_generator=TimestampIdGenerator(SystemClock()),
            logger=logger,
        )
        facade = TrackerFacade(store=store, persistence=persistence)
        facade.start()

        if args.command == "add":
            return _handle_add(args, facade)
        if args.command == "list":
            return _handle_list(args, facade)
        if args.command == "set-status":
            return _handle_set_status(args, facade)
        if args.command == "delete":
            return _handle_delete(args, facade, confirmation or ConsoleConfirmation())

    raise SystemExit(f"Unsupported command: {args.command}")


def _apply_overrides(cfg: TrackerConfig, args: argparse.Namespace) -> TrackerConfig:
    backend = args.storage_backend or cfg.storage_backend
    path = args.storage_path
    if path is None:
        path = cfg.storage_path if backend == cfg.storage_backend else _default_path(backend)
    return TrackerConfig(
        storage_backend=backend,
        storage_path=path,
        storage_key=cfg.storage_key,
        log_level=cfg.log_level,
    )


def _default_path(backend: str) -> str:
    return "./job_tracker.db" if backend == "sqlite" else "./data"


def _open_storage(cfg: TrackerConfig, stack: ExitStack) -> KeyValueStoragePort:
    if cfg.storage_backend == "sqlite":
        return stack.enter_context(SQLiteKeyValueStorage(db_path=cfg.storage_path))
    return JsonFileKeyValueStorage(cfg.storage_path)


def _handle_add(args: argparse.Namespace, facade: TrackerFacade) -> int:
    draft = ApplicationDraft(
        company=args.company,
        title=args.title,
        date=args.date,
        link=args.link,
        notes=args.notes,
    )
    try:
        record = facade.submit(draft)
    except ApplicationValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(record.id)
    return 0


def _handle_list(args: argparse.Namespace, facade: TrackerFacade) -> int:
    facade.select_filter(args.status)
    records = facade.visible_applications()
    if not records:
        print(facade.empty_message)
        return 0
    for rec in records:
        link = rec.link or "-"
        print(f"{rec.id} | {rec.company} | {rec.title} | {format_date(rec.date)} | {rec.status.value} | {link}")
    return 0


def _handle_set_status(args: argparse.Namespace, facade: TrackerFacade) -> int:
    updated = facade.change_status(args.application_id, args.status)
    if updated is None:
        print(f"not found: {args.application_id}")
        return 1
    print(f"{updated.id} -> {updated.status.value}")
    return 0


def _handle_delete(
    args: argparse.Namespace,
    facade: TrackerFacade,
    confirmation: ConfirmationPort,
) -> int:
    facade.request_delete(args.application_id)
    prompt = facade.delete_prompt() or ""
    if not args.yes and not confirmation.confirm(prompt):
        facade.cancel_delete()
        print("cancelled")
        return 0
    if facade.confirm_delete():
        print(f"deleted {args.application_id}")
        return 0
    print(f"not found: {args.application_id}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
