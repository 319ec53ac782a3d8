# studentdb/main.py

import argparse
import logging
from typing import Callable, Dict, List, Optional

from studentdb.console import build_namespace, enter_interactive
from studentdb.db.engine import DB_URL, get_engine
from studentdb.db.schema import bootstrap_schema, describe_students
from studentdb.db.sql_log import attach_sql_logger
from studentdb.repository import StudentRepository

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Open the students database and drop into an interactive shell",
    )
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Bootstrap the schema, print it and exit instead of opening a shell",
    )
    return parser.parse_args(argv)


def main(
    argv: Optional[List[str]] = None,
    db_url: str = DB_URL,
    interactive: Callable[[Dict], None] = enter_interactive,
) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    args = parse_args(argv)

    engine = get_engine(db_url)
    try:
        bootstrap_schema(engine)
        logger.info("Schema ready at %s", engine.url)

        attach_sql_logger()
        repository = StudentRepository(engine)

        if args.no_interactive:
            columns = ", ".join(
                f"{col['name']} {col['type']}{' PRIMARY KEY' if col['primary_key'] else ''}"
                for col in describe_students(engine)
            )
            print(f"students({columns})")
            return 0

        interactive(build_namespace(engine, repository))
    finally:
        engine.dispose()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
