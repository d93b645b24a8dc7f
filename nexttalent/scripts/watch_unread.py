"""
Print the unread-notification badge for one actor until interrupted.
Usage: python -m nexttalent.scripts.watch_unread <actor_id> <admin|employer|user> [--interval SECONDS]

Press Enter to force an immediate refresh.
"""
import argparse
import logging
import sys

from nexttalent.core.session import SessionContext
from nexttalent.logging_config import setup_logging
from nexttalent.models.enums import Role
from nexttalent.services.unread_poller import UnreadCountPoller

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Watch the unread notification count for one actor.")
    parser.add_argument("actor_id")
    parser.add_argument("role", choices=[r.value for r in Role])
    parser.add_argument("--interval", type=float, default=None, help="Seconds between refreshes")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(stream=sys.stderr)
    ctx = SessionContext(actor_id=args.actor_id, role=Role(args.role))
    poller = UnreadCountPoller(
        ctx,
        interval_seconds=args.interval,
        on_update=lambda count: print(f"unread: {count}", flush=True),
    )
    poller.start()
    try:
        for _line in sys.stdin:
            poller.refresh()
    except KeyboardInterrupt:
        pass
    finally:
        poller.stop(timeout=5)
    return 0


if __name__ == "__main__":
    sys.exit(main())
