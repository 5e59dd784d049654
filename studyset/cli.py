"""CLI: command-line interface for studyset."""

import argparse
import pathlib
import sys

from studyset.app import App
from studyset.export import EXPORT_FILENAME, export_csv
from studyset.parser import EmptyDeckError


def _load(args, app: App) -> bool:
    try:
        app.load(args.file)
    except (OSError, EmptyDeckError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return False
    return True


def cmd_serve(args, app: App):
    from studyset.server import start_server

    if not _load(args, app):
        sys.exit(1)

    settings = dict(app.settings)
    if args.port:
        settings["port"] = args.port
    if args.no_browser:
        settings["open_browser"] = False

    fs = app.flashcard_set
    print(f"{fs.title}: {len(fs)} cards")
    start_server(app, settings)


def cmd_status(args, app: App):
    if not _load(args, app):
        sys.exit(1)

    fs = app.flashcard_set
    print(f"Title:  {fs.title}")
    print(f"Cards:  {len(fs)}")


def cmd_export(args, app: App):
    if not _load(args, app):
        sys.exit(1)

    out = pathlib.Path(args.output)
    out.write_text(export_csv(app.flashcard_set.cards), encoding="utf-8")
    print(f"Exported {len(app.flashcard_set)} cards to {out}")


def main():
    parser = argparse.ArgumentParser(prog="studyset", description="Flashcard study modes in the browser")
    subparsers = parser.add_subparsers(dest="command")

    p_serve = subparsers.add_parser("serve", help="Start the study server")
    p_serve.add_argument("file", nargs="?", help="Deck file (default: ./data/flashcards.txt)")
    p_serve.add_argument("--port", type=int, help="Server port (default: settings port)")
    p_serve.add_argument("--no-browser", action="store_true", help="Do not open a browser")

    p_status = subparsers.add_parser("status", help="Show deck title and card count")
    p_status.add_argument("file", nargs="?", help="Deck file")

    p_export = subparsers.add_parser("export", help="Write the deck as CSV")
    p_export.add_argument("file", nargs="?", help="Deck file")
    p_export.add_argument("-o", "--output", default=EXPORT_FILENAME,
                          help=f"Output path (default: {EXPORT_FILENAME})")

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        sys.exit(1)

    app = App()

    if args.command == "serve":
        cmd_serve(args, app)
    elif args.command == "status":
        cmd_status(args, app)
    elif args.command == "export":
        cmd_export(args, app)
