#!/usr/bin/env python3
"""
TASKTRACE - CLI Interface
=========================
Console front end for a single task session.

Usage:
    tasktrace                 Seed the session and read commands from stdin
    tasktrace --no-seed       Start with an empty session
    tasktrace --json          Seed, print the session as JSON and exit

Session commands:
    add <text>    open <text>    done <id>    reset    exit
    list    log    stats    status    about    help    quit

Author: tasktrace maintainers
"""

import argparse
import sys
import json
import logging
import math
from typing import List, Optional, TextIO

from .config import get_settings
from .manager import TaskSession, run_startup_sequence
from .schema import ABOUT_TEXT

HELP_TEXT = """Commands:
  add <text>     Add a task (alias: open)
  done <id>      Mark task <id> as completed
  reset          Clear tasks and log (alias: exit)
  list           Show tasks
  log            Show the session log
  stats          Show task counts
  status         Show the status report
  about          About this program
  help           Show this help
  quit           Leave"""


def _delay(raw: str) -> float:
    """argparse type for --delay: a finite, non-negative number of seconds"""
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}")
    if not math.isfinite(value) or value < 0:
        raise argparse.ArgumentTypeError(f"must be finite and >= 0: {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasktrace",
        description="TASKTRACE - single-session task list with a console trace",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_TEXT
    )
    parser.add_argument("--no-seed", action="store_true", help="Skip the startup sample tasks")
    parser.add_argument("--delay", type=_delay, help="Startup delay in seconds")
    parser.add_argument("--json", action="store_true", help="Print the session as JSON and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show INFO logs on stderr")
    return parser


def _print_tasks(session: TaskSession, out: TextIO) -> None:
    tasks = session.tasks
    if not tasks:
        print("No tasks available.", file=out)
        return
    for task in tasks:
        mark = "x" if task.completed else " "
        print(f"  [{mark}] {task.id}. {task.description}", file=out)


def _print_last_log(session: TaskSession, out: TextIO) -> None:
    print(session.logs[-1].render(), file=out)


def handle_command(session: TaskSession, line: str, out: TextIO) -> bool:
    """Run one command line against the session. Returns False to stop."""
    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()

    if not command:
        return True

    if command in ("quit", "q"):
        return False

    if command in ("add", "open"):
        # Blank input is ignored here, the session itself accepts anything
        if not arg:
            print("Enter a task description.", file=out)
            return True
        session.add_task(arg)
        _print_last_log(session, out)

    elif command == "done":
        try:
            task_id = int(arg)
        except ValueError:
            print(f"❌ Not a task id: {arg!r}", file=out)
            return True
        session.complete_task(task_id)
        _print_last_log(session, out)

    elif command in ("reset", "exit"):
        session.reset_system()
        _print_last_log(session, out)

    elif command == "list":
        _print_tasks(session, out)

    elif command == "log":
        logs = session.logs
        if not logs:
            print("Waiting for input...", file=out)
        for entry in logs:
            print(entry.render(), file=out)

    elif command == "stats":
        snap = session.snapshot()
        print(f"Total Tasks: {snap.total_tasks}", file=out)
        print(f"Completed: {snap.completed_tasks}", file=out)

    elif command == "status":
        print(session.get_status_report(), file=out)

    elif command == "about":
        print(ABOUT_TEXT, file=out)

    elif command == "help":
        print(HELP_TEXT, file=out)

    else:
        print(f"Unknown command: {command} (try 'help')", file=out)

    return True


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    settings = get_settings()
    level = "INFO" if args.verbose else settings.log_level
    logging.basicConfig(level=logging.getLevelName(level))

    session = TaskSession()

    if settings.seed and not args.no_seed:
        delay = settings.startup_delay if args.delay is None else args.delay
        run_startup_sequence(session, delay_seconds=delay)

    if args.json:
        print(json.dumps(session.snapshot().model_dump(mode='json'), indent=2, default=str), file=stdout)
        return 0

    for entry in session.logs:
        print(entry.render(), file=stdout)

    for line in stdin:
        if not handle_command(session, line, stdout):
            break

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
