"""Entry point for kaddu CLI client."""

import argparse
import logging
import sys

from cli.api_client import KadduAPIClient
from cli.audio import create_backend
from cli.console import ConsoleUI
from cli.local_client import LocalGameClient
from kaddu.catalog import load_catalog
from kaddu.errors import CatalogError
from kaddu.feedback import FeedbackDispatcher


def main():
    parser = argparse.ArgumentParser(description='Kaddu - Casamance languages vocabulary quiz')
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='Server URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--local',
        metavar='CATALOG',
        help='Play without a server, using this words.json'
    )
    parser.add_argument(
        '--user',
        default='default',
        help='User ID (default: default)'
    )
    parser.add_argument(
        '--audio',
        choices=['none', 'file', 'tone'],
        default='none',
        help='Feedback audio: none, file (sound files), tone (synthesized failure tone)'
    )
    parser.add_argument(
        '--assets',
        default='.',
        help='Directory holding images/, audio/ and sounds/ (default: .)'
    )
    parser.add_argument('--verbose', action='store_true', help='Show debug logging')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.local:
        try:
            client = LocalGameClient(load_catalog(args.local))
        except CatalogError as e:
            print(f'Error: {e}')
            sys.exit(1)
    else:
        client = KadduAPIClient(base_url=args.server, user_id=args.user)

    dispatcher = FeedbackDispatcher(create_backend(args.audio, args.assets))
    ui = ConsoleUI(client, dispatcher)

    try:
        ui.run()
    except KeyboardInterrupt:
        print('\nAu revoir !')
        sys.exit(0)


if __name__ == '__main__':
    main()
