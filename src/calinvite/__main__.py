"""Entry point for running calinvite as a module.

Usage: python -m calinvite PROVIDER --title TITLE [options]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from calinvite.config.settings import CalInviteConfig
from calinvite.core.event_model import build_event
from calinvite.exceptions.errors import CalInviteError
from calinvite.providers.registry import SUPPORTED_PROVIDERS, generate
from calinvite.utils.error_messages import get_user_friendly_error

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="calinvite",
        description="Generate calendar links or ICS content for an event",
    )
    ap.add_argument("provider", help=f"One of: {', '.join(SUPPORTED_PROVIDERS)}")
    ap.add_argument("--title", required=True)
    ap.add_argument("--start", help="Start time (ISO-8601)")
    ap.add_argument("--end", help="End time (ISO-8601)")
    ap.add_argument("--all-day", action="store_true")
    ap.add_argument("--timezone", help="IANA name or UTC offset (default from config)")
    ap.add_argument("--description")
    ap.add_argument("--notes")
    ap.add_argument("--location")
    ap.add_argument("--url", help="Virtual meeting link")
    ap.add_argument("--attendee", action="append", default=[], dest="attendees")
    ap.add_argument("--show-attendees", action="store_true")
    ap.add_argument(
        "--session", nargs=2, action="append", default=[], metavar=("START", "END"),
        help="Add a multi-day session; may be repeated",
    )
    ap.add_argument("--env-file", help="Optional .env file with CAL_INVITE_* settings")
    ap.add_argument("--output", "-o", help="Write the result to a file instead of stdout")
    ap.add_argument("--verbose", "-v", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = CalInviteConfig.from_env(args.env_file)
    attributes = {
        "title": args.title,
        "start_time": args.start,
        "end_time": args.end,
        "all_day": args.all_day,
        "timezone": args.timezone,
        "description": args.description,
        "notes": args.notes,
        "location": args.location,
        "url": args.url,
        "attendees": args.attendees,
        "show_attendees": args.show_attendees,
        "multi_day_sessions": [tuple(pair) for pair in args.session],
    }

    try:
        event = build_event(attributes, config)
        result = generate(event, args.provider)
    except CalInviteError as e:
        logger.debug("Generation failed", exc_info=True)
        print(get_user_friendly_error(e), file=sys.stderr)
        return 2

    if args.output:
        Path(args.output).write_text(result, encoding="utf-8", newline="")
    else:
        sys.stdout.write(result + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
