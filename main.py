import sys
import curses

from config_paths import load_config
from file_type_handler import FileTypeHandler, GridLoadError
from grid_model import Grid
from logger import Logger
from theme import Theme

__version__ = "0.1.0"

log = Logger().setup_logger("Main")

USAGE = """tablespy - read table data from a file

Usage:
  tablespy [flags] filename
  tablespy -v

Flags:
  --file_type TYPE    force specific filetype, values: 'excel', 'csv' or 'auto' (default auto)
  --delimiter CHAR    char delimiter for when parsing csv, like ',' or ';' (default auto)
  --height N          max height for the table in rows (default {height})
"""


class UsageError(Exception):
    pass


class CommandArgs:
    def __init__(
        self,
        filename,
        file_type="auto",
        delimiter=None,
        table_height=20,
        show_version=False,
        show_help=False,
    ):
        self.filename = filename
        self.file_type = file_type
        self.delimiter = delimiter
        self.table_height = table_height
        self.show_version = show_version
        self.show_help = show_help


def _split_flag(arg, rest):
    """Return (name, value) for --name=value or --name value."""
    if "=" in arg:
        name, value = arg.split("=", 1)
        return name, value
    if not rest:
        raise UsageError(f"flag needs an argument: {arg}")
    return arg, rest.pop(0)


def parse_args(argv, cfg=None) -> CommandArgs:
    cfg = cfg or {}
    file_type = "auto"
    delimiter = cfg.get("DELIMITER")
    height = cfg.get("TABLE_HEIGHT", 20)
    positional = []
    show_version = False
    show_help = False

    rest = list(argv)
    while rest:
        arg = rest.pop(0)
        if not arg.startswith("-") or arg == "-":
            positional.append(arg)
            continue
        if arg in ("-v", "-V"):
            show_version = True
            continue
        if arg in ("-h", "--help"):
            show_help = True
            continue
        # -name and --name are equivalent
        name, value = _split_flag(arg, rest)
        name = name.lstrip("-")
        if name == "file_type":
            if value not in FileTypeHandler.FILE_TYPES:
                raise UsageError(
                    f"file_type can only be the following types: {list(FileTypeHandler.FILE_TYPES)}"
                )
            file_type = value
        elif name == "delimiter":
            if value == "auto":
                delimiter = None
            elif len(value) != 1:
                raise UsageError("delimiter can only be a single char")
            else:
                delimiter = value
        elif name == "height":
            try:
                height = int(value)
            except ValueError:
                raise UsageError(f"invalid value {value!r} for flag --height") from None
            if height < 1:
                raise UsageError("height must be at least 1")
        else:
            raise UsageError(f"flag provided but not defined: {arg}")

    if show_version or show_help:
        return CommandArgs(None, show_version=show_version, show_help=show_help)

    if len(positional) < 1:
        raise UsageError("filename is required")

    return CommandArgs(
        filename=positional[0],
        file_type=file_type,
        delimiter=delimiter,
        table_height=height,
    )


def main():
    args = sys.argv[1:]

    cfg = load_config()

    try:
        cmd = parse_args(args, cfg)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        print(USAGE.format(height=cfg["TABLE_HEIGHT"]), file=sys.stderr)
        sys.exit(2)

    if cmd.show_version:
        print(__version__)
        return
    if cmd.show_help:
        print(USAGE.format(height=cfg["TABLE_HEIGHT"]))
        return

    try:
        columns, rows = FileTypeHandler(
            cmd.filename, file_type=cmd.file_type, delimiter=cmd.delimiter
        ).load()
    except GridLoadError as exc:
        log.error("Load failed: %s", exc)
        print(f"Load failed: {exc}", file=sys.stderr)
        sys.exit(1)

    grid = Grid(columns, rows)
    theme = Theme.from_config(cfg)

    from orchestrator import Orchestrator

    def curses_main(stdscr):
        Orchestrator(
            stdscr,
            grid,
            file_path=cmd.filename,
            height=cmd.table_height,
            theme=theme,
        ).run()

    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()
