from __future__ import annotations

import argparse
import sys
from datetime import timedelta
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from jobposts.config import settings  # noqa: E402
from jobposts.utils.jwt_handler import create_access_token  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Print a signed bearer token for local development. "
            "In deployments tokens come from the identity provider sharing JWT_SECRET."
        )
    )
    parser.add_argument("--user-id", required=True, help="Opaque user id placed in the token subject")
    parser.add_argument(
        "--minutes",
        type=int,
        default=settings.access_token_expire_minutes,
        help="Token lifetime in minutes (defaults to ACCESS_TOKEN_EXPIRE_MINUTES)",
    )
    args = parser.parse_args(argv)

    user_id = args.user_id.strip()
    if not user_id:
        sys.stderr.write("--user-id must not be empty\n")
        return 2
    if args.minutes <= 0:
        sys.stderr.write("--minutes must be positive\n")
        return 2

    if settings.jwt_secret == "change-me":
        sys.stderr.write("WARNING: JWT_SECRET is the default value; do not use this token outside development.\n")

    print(create_access_token({"sub": user_id}, timedelta(minutes=args.minutes)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
