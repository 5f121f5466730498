"""Entry point for Gobang. Load settings, build the engine, start a front end."""

import functools
import sys

from .Presenter import StatusPresenter
from .RulesEngine import RulesEngine
from .gui.console_view import ConsoleView
from .utils.cli import parse_args
from .utils.logger import log_event
from .utils.settings import apply_cli_overrides, load_settings


def main(argv=None):
    args = parse_args(argv)
    settings = apply_cli_overrides(load_settings(args.settings), args)

    logger = None
    if not args.quiet:
        # Keep stdout for the console board
        logger = functools.partial(log_event, stream=sys.stderr) if args.console else log_event
    engine = RulesEngine(logger=logger)

    if args.console:
        ConsoleView(presenter=StatusPresenter(settings["language"])).run(engine)
        return

    from .gui.pygame_view import PygameView

    view = PygameView(
        cell_size=settings["cell_size"],
        margin=settings["margin"],
        stone_radius=settings["stone_radius"],
        language=settings["language"],
        fps=settings["fps"],
        font_path=settings["font_path"],
    )
    try:
        view.run(engine)
    finally:
        view.close()


if __name__ == "__main__":
    main()
