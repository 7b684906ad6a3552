"""maintd CLI"""

import argparse
import asyncio
import json
import sys
from datetime import datetime, timezone

from dispatcher.exception import DispatcherError
from dispatcher.model.outcome import UnknownSchedule, is_success, outcome_to_dict
from dispatcher.schedule import ScheduleTable
from maintd import __version__
from maintd.bootstrap import (
    VALID_MODULES,
    build_router,
    configure_logging,
    create_http_client,
    load_settings,
    run_services,
)
from store import create_store


async def trigger_once(settings, schedule_expression: str) -> int:
    """트리거 1회 실행 후 결과 출력 (종료 코드 반환)"""
    store = create_store(settings.store)
    await store.connect()
    try:
        async with create_http_client() as client:
            router = build_router(settings, store, client)
            result = await router.on_trigger(schedule_expression)
    finally:
        await store.disconnect()

    if isinstance(result, UnknownSchedule):
        print(json.dumps({"matched": False, "schedule": schedule_expression}))
        return 1

    print(json.dumps({"matched": True, "schedule": schedule_expression, "outcome": outcome_to_dict(result)}))
    return 0 if is_success(result) else 1


def list_schedules(settings) -> None:
    """스케줄 테이블과 다음 실행 시각(UTC) 출력"""
    table = ScheduleTable.from_entries(settings.dispatcher.schedules)
    now = datetime.now(timezone.utc)
    for operation in table:
        next_run = table.next_fire_time(operation.schedule_expression, now)
        print(f"{operation.schedule_expression:<20} {operation.name:<28} next={next_run.isoformat()}")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="maintd",
        description="maintd - 크론 트리거 기반 유지보수 엔드포인트 디스패처"
    )
    parser.add_argument("-c", "--config-dir", default=None, help="Config directory (default: $MAINTD_CONFIG_DIR or ./config)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # run command
    run_parser = subparsers.add_parser("run", help="Run dispatcher and/or admin API")
    run_parser.add_argument(
        "modules",
        nargs="*",
        help=f"Modules to run: {', '.join(VALID_MODULES)} (default: all)"
    )

    # trigger command
    trigger_parser = subparsers.add_parser("trigger", help="Deliver one trigger and print the outcome")
    trigger_parser.add_argument("schedule_expression", help="Cron expression, e.g. '30 2 * * sun'")

    # schedules command
    subparsers.add_parser("schedules", help="List the schedule table")

    # version
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    try:
        settings = load_settings(args.config_dir)
        configure_logging(settings)

        if args.command == "run":
            invalid = [m for m in args.modules if m not in VALID_MODULES]
            if invalid:
                parser.error(f"unknown module(s): {', '.join(invalid)}")
            modules = args.modules or list(VALID_MODULES)
            print(f"Starting maintd: {', '.join(modules)}")
            try:
                asyncio.run(run_services(settings, modules))
            except KeyboardInterrupt:
                print("\nShutdown requested by user")
        elif args.command == "trigger":
            sys.exit(asyncio.run(trigger_once(settings, args.schedule_expression)))
        elif args.command == "schedules":
            list_schedules(settings)
    except DispatcherError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
