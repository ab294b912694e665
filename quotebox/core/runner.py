import argparse
import time
from typing import List, Optional

from quotebox.core.app import QuoteApp
from quotebox.core.builders import build_app
from quotebox.core.config import DEFAULT_CONFIG_PATH, load_config
from quotebox.sync.engine import SyncOutcome
from quotebox.transfer.json_io import EXPORT_FILENAME

DEFAULT_SYNC_INTERVAL = 60


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='quotebox',
        description='Random quote viewer with server synchronization',
    )
    parser.add_argument('--config', default=DEFAULT_CONFIG_PATH, help='Path to config.json')
    parser.add_argument('--debug', action='store_true', default=False, help='Verbose output')

    sub = parser.add_subparsers(dest='command')

    show = sub.add_parser('show', help='Show a random quote')
    show.add_argument('--category', default=None, help='Category filter ("all" for no filter)')

    add = sub.add_parser('add', help='Add a new quote')
    add.add_argument('text')
    add.add_argument('category')

    sub.add_parser('categories', help='List known categories')

    export = sub.add_parser('export', help='Export quotes to a JSON file')
    export.add_argument('path', nargs='?', default=EXPORT_FILENAME)

    imp = sub.add_parser('import', help='Import quotes from a JSON file')
    imp.add_argument('path')

    sub.add_parser('sync', help='Synchronize with the server once')
    sub.add_parser('watch', help='Synchronize periodically until interrupted')
    return parser


def run_sync_loop(app: QuoteApp, interval: int, loop_enabled: bool = True) -> None:
    """Синхронизирует коллекцию с сервером каждые `interval` секунд до Ctrl+C."""

    if not loop_enabled:
        interval = 0

    try:
        while True:
            app.sync_now()

            if not interval or interval <= 0:
                break

            print(f"Следующая синхронизация через {interval} секунд...")
            time.sleep(interval)
    except KeyboardInterrupt:
        print("Остановка по Ctrl+C.")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    config = load_config(args.config)
    debug = bool(args.debug or config.get('debug', False))

    app = build_app(config, debug=debug)
    app.start()

    command = args.command or 'show'

    if command == 'show':
        app.show_random_quote(getattr(args, 'category', None))
        return 0

    if command == 'add':
        return 0 if app.add_quote(args.text, args.category) else 1

    if command == 'categories':
        for name in app.categories():
            print(name)
        return 0

    if command == 'export':
        return 0 if app.export_quotes(args.path) else 1

    if command == 'import':
        return 0 if app.import_quotes(args.path) is not None else 1

    if command == 'sync':
        outcome = app.sync_now()
        return 1 if outcome in (None, SyncOutcome.FAILED) else 0

    # watch
    app.show_random_quote()
    interval = int(config.get('sync_interval_seconds') or DEFAULT_SYNC_INTERVAL)
    run_sync_loop(app, interval, bool(config.get('loop', True)))
    return 0
