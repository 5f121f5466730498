"""CLI options for choosing the front end, language and config path."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gobang: two-player five-in-a-row on a 15x15 board")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--console", action="store_true", help="Play in the terminal instead of the pygame window")
    parser.add_argument("--language", choices=["en", "zh"], help="Status text language")
    parser.add_argument("--cell-size", type=int, help="Pixels between grid lines")
    parser.add_argument("--margin", type=int, help="Pixels between window edge and the outer grid line")
    parser.add_argument("--quiet", action="store_true", help="Do not log moves to stdout")
    return parser.parse_args(argv)
