import curses
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version

import pandas as pd

import config_paths

try:
    __version__ = version("tuiwin")
except PackageNotFoundError:
    __version__ = "0.0.0"

USAGE = "tuiwin-demo - curses window and widget demo\n\nUsage:\n  tuiwin-demo\n  tuiwin-demo -v\n"


def configure_logging(cfg) -> bool:
    # curses owns the terminal, so records only ever go to a file
    if not cfg.get("LOG_PATH"):
        return False
    logging.basicConfig(
        filename=cfg["LOG_PATH"],
        level=getattr(logging, cfg.get("LOG_LEVEL", "WARNING")),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    return True


def run_demo(stdscr):
    from field_editor import FieldEditor
    from screen_info import ScreenInfo, screen_limits
    from selection_window import SelectionOption, SelectionWindow
    from table_window import Table, TableSource
    from yielders import DtypeYielder, StringYielder

    stdscr.refresh()
    max_h, max_w = screen_limits()
    width = min(50, max_w)

    fruits = ["Apple", "Banana", "Cherry", "Durian"]
    with SelectionWindow(
        "Pick fruits",
        ScreenInfo(min(12, max_h), width, 0, 0),
        fruits,
        SelectionOption(centered=True, multi=True),
    ) as picker:
        picked, ok = picker.run()
    if not ok:
        return None

    rows = []
    for index in sorted(picked):
        name = StringYielder(fruits[index])
        count = DtypeYielder("Int64", 1)
        with FieldEditor(
            f"Edit {fruits[index]}",
            ["Name", "Count"],
            ScreenInfo(min(9, max_h), width, 0, 0),
        ) as editor:
            if not editor.run([name, count]):
                continue
        rows.append({"name": name.value, "count": count.value if count.is_valid() else pd.NA})

    df = pd.DataFrame(rows, columns=["name", "count"])
    with Table(TableSource.from_dataframe(df, auto_resize=True), ScreenInfo(1, 1, 0, 0)) as table:
        if len(df):
            table.highlight_row(0)
        table.window.getch()
    return df


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args:
        print(USAGE)
        return

    cfg = config_paths.load_config()
    configure_logging(cfg)

    # Make ESC snappy
    os.environ.setdefault("ESCDELAY", str(cfg["ESCDELAY"]))

    df = curses.wrapper(run_demo)
    if df is not None:
        print(df.to_string(index=False))


if __name__ == "__main__":
    main()
