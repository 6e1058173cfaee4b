"""Issue a relay token for a provider and print its webhook query string."""

from __future__ import annotations

import argparse
from datetime import timedelta

from statushook.config import get_settings
from statushook.services.normalization import ADAPTERS
from statushook.services.security import issue_token


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("service", choices=sorted(ADAPTERS), help="provider the token authorizes")
    parser.add_argument("--days", type=int, default=None, help="expire the token after this many days")
    parser.add_argument("--base-url", default="", help="relay URL to prefix the query string with")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    if not settings.signing_secret:
        print("JWT_SECRET is not configured")
        return 1
    expires_in = timedelta(days=args.days) if args.days else None
    token = issue_token(args.service, settings.signing_secret, expires_in=expires_in)
    print(f"{args.base_url}?token={token}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
