#!/usr/bin/env python3
"""
Lingle - multi-language daily word game
Terminal entry point
"""

import argparse
import logging

from lingle.config import get_settings
from lingle.core.session.game_session import share_text
from lingle.database import init_db
from lingle.errors import GameError, InvalidGuessError
from lingle.game_service import GameService
from lingle.utils import format_all_stats, format_row
from lingle.word_bank import get_word_bank


def parse_args():
    parser = argparse.ArgumentParser(description="Play today's Lingle puzzle")
    parser.add_argument("--language", "-l", default="en", help="Language code")
    parser.add_argument("--user-id", type=int, help="Save the result for this user")
    return parser.parse_args()


def main():
    """Main application entry point"""
    args = parse_args()

    # Load configuration
    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    logger = logging.getLogger(__name__)
    logger.info("Starting Lingle...")

    db_manager = init_db() if args.user_id is not None else None
    service = GameService(get_word_bank(), db_manager, settings)

    try:
        session = service.new_game(args.language)
    except GameError as e:
        logger.error(f"Cannot start game: {e}")
        raise SystemExit(1) from e

    print(f"Lingle {args.language.upper()} - guess the {session.word_length}-letter word")

    try:
        while not session.is_finished:
            guess = input(f"[{session.row + 1}/{session.max_guesses}] > ")
            try:
                session = service.play(session, guess)
            except InvalidGuessError as e:
                print(e)
                continue
            print(format_row(session.guesses[-1], list(session.rows[-1])))
    except (KeyboardInterrupt, EOFError):
        logger.info("Game abandoned")
        return

    print(f"\nThe word was {session.target.upper()}\n")
    print(share_text(session, service.selector.day_number(session.day)))

    if args.user_id is not None:
        if not service.record_session(session, args.user_id):
            logger.warning(f"Result for user {args.user_id} was not saved")
            print("\n⚠️ Result could not be saved")
        print()
        print(format_all_stats(service.get_stats(args.user_id)))


if __name__ == "__main__":
    main()
