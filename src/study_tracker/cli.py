from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Iterable, List, Optional

from .bootstrap import configure_logging
from .config import get_settings
from .domain import Err, Session, SessionDraft, Settings
from .services import ReminderScheduler
from .api import api_state

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Study Tracker command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Schedule a study session.")
    add_parser.add_argument("title")
    add_parser.add_argument("--subject", required=True)
    add_parser.add_argument("--date", required=True, help="YYYY-MM-DD")
    add_parser.add_argument("--start", required=True, help="HH:mm")
    add_parser.add_argument("--duration", type=int, required=True, help="Minutes")

    edit_parser = subparsers.add_parser("edit", help="Edit fields of a session.")
    edit_parser.add_argument("session_id")
    edit_parser.add_argument("--title")
    edit_parser.add_argument("--subject")
    edit_parser.add_argument("--date")
    edit_parser.add_argument("--start")
    edit_parser.add_argument("--duration", type=int)

    remove_parser = subparsers.add_parser("remove", help="Delete a session.")
    remove_parser.add_argument("session_id")

    complete_parser = subparsers.add_parser("complete", help="Mark a session complete.")
    complete_parser.add_argument("session_id")
    complete_parser.add_argument("--undo", action="store_true", help="Mark the session incomplete instead.")

    subparsers.add_parser("today", help="List today's sessions.")

    week_parser = subparsers.add_parser("week", help="List a week of sessions.")
    week_parser.add_argument("--start", help="First day of the week (YYYY-MM-DD); defaults to this Sunday.")

    subparsers.add_parser("settings", help="Show settings.")

    toggle_parser = subparsers.add_parser("toggle", help="Turn a setting on or off.")
    toggle_parser.add_argument("name", choices=Settings.names())
    toggle_parser.add_argument("state", choices=("on", "off"))

    subparsers.add_parser("remind", help="Watch for sessions ending and print reminders.")

    serve_parser = subparsers.add_parser("serve", help="Start the local HTTP API.")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)

    subparsers.add_parser("reset", help="Delete all stored sessions and settings.")

    return parser


def _format_session(session: Session) -> str:
    mark = "x" if session.completed else " "
    return (
        f"[{mark}] {session.date} {session.start_time} ({session.duration} min) "
        f"{session.title} / {session.subject}  id={session.id}"
    )


def _print_sessions(sessions: Iterable[Session]) -> None:
    lines = [_format_session(session) for session in sessions]
    print("\n".join(lines) if lines else "No sessions.")


def _print_settings(settings: Settings) -> None:
    for name in Settings.names():
        print(f"{name}: {'on' if getattr(settings, name) else 'off'}")


def _edit_changes(args: argparse.Namespace) -> dict:
    mapping = {
        "title": args.title,
        "subject": args.subject,
        "date": args.date,
        "start_time": args.start,
        "duration": args.duration,
    }
    return {key: value for key, value in mapping.items() if value is not None}


async def _watch_reminders(scheduler: ReminderScheduler) -> None:
    def _announce(session: Session) -> None:
        print(f"Time's up: {session.title} ({session.subject}) has ended.", flush=True)

    scheduler.register_callback(_announce)
    scheduler.start()
    try:
        await asyncio.Event().wait()
    finally:
        scheduler.stop()
        scheduler.register_callback(None)


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    logger.debug("Study Tracker CLI starting")
    parser = build_parser()
    args = parser.parse_args(argv)
    controller = api_state.controller

    if args.command == "add":
        draft = SessionDraft(
            title=args.title,
            subject=args.subject,
            date=args.date,
            start_time=args.start,
            duration=args.duration,
        )
        result = controller.create_session(draft)
    elif args.command == "edit":
        result = controller.edit_session(args.session_id, _edit_changes(args))
    elif args.command == "complete":
        result = controller.mark_session_complete(args.session_id, not args.undo)
    elif args.command == "remove":
        controller.delete_session(args.session_id)
        return 0
    elif args.command == "today":
        _print_sessions(controller.load_sessions_for_today())
        return 0
    elif args.command == "week":
        _print_sessions(controller.load_sessions_for_week(args.start))
        return 0
    elif args.command == "settings":
        _print_settings(controller.load_settings())
        return 0
    elif args.command == "toggle":
        result = controller.toggle_setting(args.name, args.state == "on")
    elif args.command == "remind":
        try:
            asyncio.run(_watch_reminders(api_state.scheduler))
        except KeyboardInterrupt:
            pass
        return 0
    elif args.command == "serve":
        from .services.http import run_local_server

        http = get_settings().http
        run_local_server(host=args.host or http.host, port=args.port or http.port)
        return 0
    elif args.command == "reset":
        api_state.state_store.clear_state()
        return 0
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()
        return 2

    if isinstance(result, Err):
        print(result.message, file=sys.stderr)
        return 1
    value = result.value
    if isinstance(value, Settings):
        _print_settings(value)
    else:
        _print_sessions([value])
    return 0


if __name__ == "__main__":
    sys.exit(main())
