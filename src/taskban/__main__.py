"""Entry point for the taskban CLI."""

import argparse
import logging
import sys

from taskban import __version__

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskban", description="Terminal kanban board")
    board = parser.add_mutually_exclusive_group()
    board.add_argument("--demo", dest="board", action="store_const", const="demo", help="Start with sample tasks (default)")
    board.add_argument("--empty", dest="board", action="store_const", const="empty", help="Start with empty default columns")
    parser.set_defaults(board="demo")
    parser.add_argument("--repo", default=".", help="Git repository to read [taskban] config from (default: .)")
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level when --log-file is given (default: INFO)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(log_file: str | None, level: str) -> None:
    """Log to log_file when given, otherwise install a NullHandler."""
    if log_file:
        logging.basicConfig(filename=log_file, format=LOG_FORMAT, level=getattr(logging, level))
    else:
        logging.getLogger("taskban").addHandler(logging.NullHandler())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    from taskban.config import load_config
    from taskban.model.sample import default_columns, sample_columns
    from taskban.model.store import BoardStore
    from taskban.ui import TaskbanApp

    config = load_config(args.repo)
    columns = sample_columns() if args.board == "demo" else default_columns()
    store = BoardStore(columns, due_days=config.due_days)
    TaskbanApp(store, config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
