from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from sqlalchemy import create_engine, inspect  # noqa: E402

from jobposts.config import build_sqlalchemy_db_url, settings  # noqa: E402
from jobposts.database import Base, mask_db_url  # noqa: E402
import jobposts.models  # noqa: F401,E402  # registers job_posts / job_skills


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Create the job_posts and job_skills tables in the configured DB (EXPLICIT action)."
    )
    parser.add_argument(
        "--db-url",
        default=None,
        help="Target DB URL (defaults to ORM_DB_URL / DB_URL / DB_* from .env or env vars).",
    )
    parser.add_argument(
        "--i-understand",
        action="store_true",
        help="Required safety flag. Prevents accidental DDL against shared DBs.",
    )
    args = parser.parse_args(argv)

    if not args.i_understand:
        print("Refusing to run without --i-understand (safety).")
        return 2

    url = args.db_url or build_sqlalchemy_db_url(settings)
    print("creating tables on:", mask_db_url(url))

    connect_args = {"check_same_thread": False} if str(url).startswith("sqlite") else {}
    engine = create_engine(url, pool_pre_ping=True, future=True, connect_args=connect_args)
    Base.metadata.create_all(bind=engine)

    existing = set(inspect(engine).get_table_names())
    for table in sorted(Base.metadata.tables):
        print(f"  {table}: {'ok' if table in existing else 'MISSING'}")
    engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
