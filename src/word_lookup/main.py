"""Main entry point for the word lookup command line."""

import argparse
import logging
import sys

from word_lookup.coordinators import LookupCoordinator
from word_lookup.io import SqliteKeyValueStorage
from word_lookup.services import DictionaryLookupError, DictionaryService, SettingsManager, UserActivityStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="word-lookup", description="Dictionary lookups with personal history")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    lookup = sub.add_parser("lookup", help="Look up a word and record the search")
    lookup.add_argument("word")
    lookup.add_argument("--user", required=True)
    lookup.add_argument("--category", default=None)

    favorite = sub.add_parser("favorite", help="Toggle a word in favorites")
    favorite.add_argument("word")
    favorite.add_argument("--user", required=True)

    for name, help_text in (("stats", "Show usage statistics"), ("history", "Show search history")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--user", required=True)

    sub.add_parser("word-of-the-day", help="Show today's word")
    return parser


def main(argv=None):
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1. Configuration and storage
    settings = SettingsManager()
    storage = SqliteKeyValueStorage(settings.get_data_path())
    storage.ensure_schema()

    # 2. Services
    store = UserActivityStore(storage)
    dictionary = DictionaryService(
        api_key=settings.get_dictionary_api_key(),
        api_url=settings.get_dictionary_api_url(),
    )
    coordinator = LookupCoordinator(dictionary_service=dictionary, activity_store=store)

    try:
        if getattr(args, "user", None):
            store.initialize(args.user)
        return _run(args, store, coordinator)
    except DictionaryLookupError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        dictionary.close()
        storage.close()


def _run(args, store: UserActivityStore, coordinator: LookupCoordinator) -> int:
    if args.command == "lookup":
        result = coordinator.handle_search(args.word, args.category)
        if not result.found:
            print(f"No entries for '{args.word}'.")
            if result.suggestions:
                print("Did you mean: " + ", ".join(result.suggestions))
            return 1
        for entry in result.entries:
            print(f"{entry.headword} ({entry.part_of_speech})")
            for definition in entry.definitions:
                print(f"  - {definition}")
            if entry.audio_url:
                print(f"  audio: {entry.audio_url}")
        return 0

    if args.command == "favorite":
        coordinator.handle_search(args.word)
        outcome = coordinator.toggle_favorite()
        print(outcome.value)
        return 0 if outcome.applied else 1

    if args.command == "stats":
        stats = store.get_stats()
        print(f"Total searches:  {stats.total_searches}")
        print(f"Unique words:    {stats.unique_words}")
        print(f"Streak:          {stats.streak}")
        print(f"Words per day:   {stats.words_per_day}")
        print(f"Most active day: {stats.most_active_day}")
        return 0

    if args.command == "history":
        for item in store.get_search_history():
            print(f"{item.timestamp:%Y-%m-%d %H:%M}  {item.word}")
        return 0

    word = store.get_word_of_the_day()
    print(f"{word.word} ({word.part_of_speech}): {word.definition}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
