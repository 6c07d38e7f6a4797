"""
Command-line interface::

    python -m affixgen -d path/to/en_US check text.txt -l
    python -m affixgen -d path/to/en_US wordlist
    python -m affixgen -d path/to/en_US analyze text.txt
    python -m affixgen lev kitten sitting --limit 3
    python -m affixgen dictionaries

``check``, ``analyze`` read stdin when no file is given. ``check`` exits with 1 if there were
misspelled words.
"""

import re
import sys
import logging
import argparse
from typing import Iterator, List, Optional, TextIO

from affixgen.dictionary import Dictionary
from affixgen.algo.string_metrics import distance_limited

log = logging.getLogger('affixgen')

WORD_REGEXP = re.compile(r"\w+(?:['\-]\w+)*")

LEV_DEFAULT_LIMIT = 1000


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='affixgen',
        description='Affix-based word forms generation and spellchecking'
    )
    parser.add_argument('-d', '--dict-path', dest='dict_path', metavar='DICTIONARY',
                        help='dictionary path (<path>.aff and <path>.dic should be present), '
                             'or name of the dictionary installed in the system')
    parser.add_argument('--skip-invalid', action='store_true',
                        help='skip affix rules with invalid conditions instead of failing')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')

    commands = parser.add_subparsers(dest='command', metavar='COMMAND')
    commands.required = True

    check = commands.add_parser('check', help='check spelling of the text')
    check.add_argument('file', nargs='?', help='text file (stdin if absent)')
    check.add_argument('-l', '--list-misspelled', action='store_true',
                       help='print misspelled words')

    commands.add_parser('wordlist', help="print all the words of the dictionary, with their forms")

    analyze = commands.add_parser('analyze', help='morphological analysis of words of the text')
    analyze.add_argument('file', nargs='?', help='text file (stdin if absent)')

    lev = commands.add_parser('lev', help='calculate levenshtein distance')
    lev.add_argument('string_a', help='the start string to calculate distance from')
    lev.add_argument('string_b', help='the end string to calculate distance to')
    lev.add_argument('-l', '--limit', type=int, default=LEV_DEFAULT_LIMIT,
                     help='maximum distance to calculate (default %(default)s)')

    commands.add_parser('dictionaries', help='print the search path and found dictionaries')

    return parser


def words_of(text: TextIO) -> Iterator[str]:
    for line in text:
        yield from WORD_REGEXP.findall(line)


def read_words(path: Optional[str]) -> List[str]:
    if path is None:
        return list(words_of(sys.stdin))
    with open(path, encoding='utf-8') as text:
        return list(words_of(text))


def load_dictionary(path: str, skip_invalid: bool) -> Dictionary:
    if '/' in path or path.startswith('.'):
        return Dictionary.from_files(path, skip_invalid=skip_invalid)
    try:
        return Dictionary.from_system(path, skip_invalid=skip_invalid)
    except LookupError:
        return Dictionary.from_files(path, skip_invalid=skip_invalid)


def main(argv: Optional[List[str]] = None, out: TextIO = sys.stdout) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    if args.command == 'lev':
        if args.limit < 0:
            parser.error('limit should be non-negative')
        print(distance_limited(args.string_a, args.string_b, args.limit), file=out)
        return 0

    if args.command == 'dictionaries':
        print('Search path:', file=out)
        for folder in Dictionary.PATHES:
            print(f'  {folder}', file=out)
        print('Found dictionaries:', file=out)
        for path in Dictionary.installed():
            print(f'  {path}', file=out)
        return 0

    if not args.dict_path:
        parser.error(f'{args.command} requires a dictionary (-d)')

    try:
        dictionary = load_dictionary(args.dict_path, args.skip_invalid)
    except (OSError, ValueError) as e:
        log.error('Cannot load dictionary %s: %s', args.dict_path, e)
        return 2

    if args.command == 'wordlist':
        for word in dictionary.words():
            print(word, file=out)
        return 0

    try:
        words = read_words(args.file)
    except OSError as e:
        log.error('Cannot read %s: %s', args.file, e)
        return 2

    if args.command == 'analyze':
        for word in words:
            analysis = dictionary.analyze(word)
            if not analysis:
                print(f'{word}: unknown', file=out)
            for line in analysis:
                print(f'{word}: {line}', file=out)
        return 0

    misspelled = [word for word in words if not dictionary.lookup(word)]
    if args.list_misspelled:
        for word in misspelled:
            print(word, file=out)
    log.info('%d misspelled words found', len(misspelled))

    return 1 if misspelled else 0


if __name__ == '__main__':
    sys.exit(main())
