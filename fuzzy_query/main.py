#!/usr/bin/env python3
# Path: fuzzy_query/main.py
"""
fuzzy_query - Command Line Entry Point

Runs a fuzzy search against one table of a database and prints the
matching rows, best match first.

Data Flow:
    INPUT:  Command line searches, .env / FUZZY_QUERY_* configuration
    PROCESS: Matcher scoring and condition composition
    OUTPUT: Matching rows (or the generated SQL) on stdout

Usage:
    python -m fuzzy_query --table users --search name jd
    python -m fuzzy_query --table users --search name jd --search country uk
    python -m fuzzy_query --table users --search name ed --search country italy --any
    python -m fuzzy_query --table users --search name jd --sql
    python -m fuzzy_query --list-matchers
"""

import argparse
import sys
from typing import Optional, Sequence

from sqlalchemy import MetaData, Table, select
from sqlalchemy.exc import SQLAlchemyError

from .config_loader import ConfigLoader
from .constants import STATUS_FAIL, STATUS_INFO, STATUS_OK
from .core.logger import get_input_logger, setup_ipo_logging
from .database.engine import initialize_engine
from .database.operations import FuzzyQuery
from .process.matcher.engine.registry import get_default_registry
from .process.matcher.models.errors import FuzzyQueryError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='fuzzy_query',
        description='fuzzy_query - relevance-ranked fuzzy search over SQL tables',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m fuzzy_query --table users --search name jd
  python -m fuzzy_query --table users --search name jd --search country uk
  python -m fuzzy_query --table users --search name ed --search country italy --any
  python -m fuzzy_query --table users --search name jd --min-relevance 70
  python -m fuzzy_query --list-matchers
        """
    )

    parser.add_argument(
        '--database-url', '-d',
        type=str,
        help='SQLAlchemy database URL (default: FUZZY_QUERY_DATABASE_URL)'
    )

    parser.add_argument(
        '--table', '-t',
        type=str,
        help='Table to search'
    )

    parser.add_argument(
        '--search', '-s',
        nargs=2,
        action='append',
        metavar=('FIELD', 'TERM'),
        default=[],
        help='Fuzzy search one field (repeatable)'
    )

    parser.add_argument(
        '--any',
        action='store_true',
        help='Match rows satisfying any search instead of all of them'
    )

    parser.add_argument(
        '--weight', '-w',
        type=float,
        default=1.0,
        help='Score multiplier applied to every search (default: 1)'
    )

    parser.add_argument(
        '--exclude', '-x',
        action='append',
        metavar='MATCHER',
        default=[],
        help='Disable a matcher (repeatable, see --list-matchers)'
    )

    parser.add_argument(
        '--order-by', '-o',
        action='append',
        metavar='FIELD',
        default=[],
        help='Order by the relevance of a searched field first (repeatable)'
    )

    parser.add_argument(
        '--min-relevance', '-m',
        type=float,
        help='Only return rows with at least this total relevance'
    )

    parser.add_argument(
        '--no-order',
        action='store_true',
        help='Do not order rows by total relevance'
    )

    parser.add_argument(
        '--limit', '-n',
        type=int,
        help='Maximum number of rows to print'
    )

    parser.add_argument(
        '--sql',
        action='store_true',
        help='Print the generated SQL instead of running it'
    )

    parser.add_argument(
        '--list-matchers',
        action='store_true',
        help='List available matchers and their weights'
    )

    return parser


def list_matchers() -> None:
    """Print the configured matchers with their base weights."""
    registry = get_default_registry()

    print(f"\n{STATUS_OK} {len(registry)} matchers:\n")
    print(f"  {'Matcher':<24} {'Weight':>8}")
    print(f"  {'-' * 33}")
    for name, weight in registry.weights().items():
        print(f"  {name:<24} {weight:>8g}")
    print()


def build_query(table: Table, args: argparse.Namespace) -> FuzzyQuery:
    """
    Build the fuzzy query described by the command line.

    Args:
        table: Reflected table to search
        args: Parsed arguments

    Returns:
        FuzzyQuery over select(table)
    """
    query = FuzzyQuery(select(table), default_enable_ordering=not args.no_order)

    for index, (field, term) in enumerate(args.search):
        add = query.or_where_fuzzy if args.any and index > 0 else query.where_fuzzy
        add(field, term, weight=args.weight, excluded_matchers=args.exclude)

    if args.order_by:
        query.order_by_fuzzy(args.order_by)

    if args.min_relevance is not None:
        query.with_minimum_relevance(args.min_relevance)

    return query


def print_rows(columns: Sequence[str], rows: Sequence) -> None:
    """Print rows as a tab-separated table."""
    print('\t'.join(columns))
    for row in rows:
        print('\t'.join('' if value is None else str(value) for value in row))


def run_search(args: argparse.Namespace, logger) -> int:
    """
    Reflect the table, run the search and print the result.

    Args:
        args: Parsed arguments
        logger: Logger instance

    Returns:
        Exit code (0 for success)
    """
    if not args.table:
        raise ValueError("--table is required")
    if not args.search:
        raise ValueError("at least one --search FIELD TERM is required")
    if args.limit is not None and args.limit < 1:
        raise ValueError("--limit must be a positive integer")

    engine = initialize_engine(args.database_url)
    table = Table(args.table, MetaData(), autoload_with=engine)
    logger.info(f"Reflected table {table.name} ({len(table.columns)} columns)")

    query = build_query(table, args)

    if args.sql:
        print(query.to_sql(engine))
        return 0

    statement = query.statement
    if args.limit is not None:
        statement = statement.limit(args.limit)

    with engine.connect() as connection:
        result = connection.execute(statement)
        columns = list(result.keys())
        rows = result.all()

    if not rows:
        print(f"{STATUS_INFO} No matching rows.")
        return 0

    print_rows(columns, rows)
    print(f"\n{STATUS_OK} {len(rows)} rows")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for fuzzy_query.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    config = ConfigLoader()
    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=config.get('log_level', 'INFO'),
        console_output=config.get('log_console', True),
    )
    logger = get_input_logger('main')

    try:
        if args.list_matchers:
            list_matchers()
            return 0

        return run_search(args, logger)

    except (FuzzyQueryError, ValueError) as e:
        print(f"\n{STATUS_FAIL} Error: {e}")
        logger.error(f"Usage error: {e}")
        return 1

    except SQLAlchemyError as e:
        print(f"\n{STATUS_FAIL} Database error: {e}")
        logger.error(f"Database error: {e}")
        return 1

    except KeyboardInterrupt:
        print("\n[Interrupted]")
        return 130


if __name__ == '__main__':
    sys.exit(main())
