# -*- coding: utf-8 -*-
"""
Maintenance CLI for the wellness database.

Usage:
    python -m ayurveda.cli init-db
    python -m ayurveda.cli grant-admin <email>
    python -m ayurveda.cli revoke-admin <email>
    python -m ayurveda.cli questions
    python -m ayurveda.cli stats
    python -m ayurveda.cli mark-missed [--grace-days N]
"""

from __future__ import annotations

import argparse
import json
import sys

from .app_db import init_app_db
from .config import configure_logging, settings


def cmd_init_db(args: argparse.Namespace) -> int:
    """Create tables and seed the question bank."""
    init_app_db(settings.app_db_path)
    print(f"Database ready: {settings.app_db_path}")
    return 0


def cmd_set_admin(args: argparse.Namespace) -> int:
    from .auth.storage import set_admin

    init_app_db(settings.app_db_path)
    if not set_admin(args.email, args.grant):
        print(f"Error: no user with email {args.email}")
        return 1
    print(f"{'Granted' if args.grant else 'Revoked'} admin for {args.email}")
    return 0


def cmd_questions(args: argparse.Namespace) -> int:
    from .quiz.storage import list_questions

    init_app_db(settings.app_db_path)
    for q in list_questions():
        print(f"{q['order_number']:>3}. [{q['category']}] {q['question']}")
        print(f"       vata:  {q['vata_option']}")
        print(f"       pitta: {q['pitta_option']}")
        print(f"       kapha: {q['kapha_option']}")
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    from .admin.storage import get_stats

    init_app_db(settings.app_db_path)
    print(json.dumps(get_stats(), indent=2))
    return 0


def cmd_mark_missed(args: argparse.Namespace) -> int:
    from .followups.storage import mark_missed

    init_app_db(settings.app_db_path)
    count = mark_missed(args.grace_days)
    print(f"Marked {count} follow-ups as missed")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Ayurveda wellness database maintenance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default=None, help="Override AYURVEDA_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("init-db", help="Create tables and seed questions")

    grant_parser = subparsers.add_parser("grant-admin", help="Give a user admin access")
    grant_parser.add_argument("email", help="User email")
    grant_parser.set_defaults(grant=True)

    revoke_parser = subparsers.add_parser("revoke-admin", help="Remove admin access")
    revoke_parser.add_argument("email", help="User email")
    revoke_parser.set_defaults(grant=False)

    subparsers.add_parser("questions", help="Print the question bank")
    subparsers.add_parser("stats", help="Print dashboard counters")

    missed_parser = subparsers.add_parser("mark-missed", help="Mark overdue follow-ups as missed")
    missed_parser.add_argument("--grace-days", type=int, default=0, help="Days past due before a follow-up is missed")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.log_level.upper() if args.log_level else None)

    commands = {
        "init-db": cmd_init_db,
        "grant-admin": cmd_set_admin,
        "revoke-admin": cmd_set_admin,
        "questions": cmd_questions,
        "stats": cmd_stats,
        "mark-missed": cmd_mark_missed,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
