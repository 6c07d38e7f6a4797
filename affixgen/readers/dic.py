import re
import logging

from affixgen.data import dic

from affixgen.readers.file_reader import FileReader
from affixgen.readers.aff import Context

log = logging.getLogger(__name__)

COUNT_REGEXP = re.compile(r'^\d+(\s+|$)')   # should start with digits, but can have whatever further
SPACES_REGEXP = re.compile(r'\s+')
SLASH_REGEXP = re.compile(r'(?<!\\)/')


def read_dic(source: FileReader, *, context: Context) -> dic.Dic:
    """
    Reads source and creates :class:`Dic <affixgen.data.dic.Dic>` from it.

    Each line is ``<stem>/<flags> <morphological tags>``. Flags and tags are optional; if the stem
    should contain "/", it is escaped as ``\\/``.

    Args:
        source: Reader (thin wrapper around opened file, targeting line-by-line reading)
        context: Context created while reading .aff file and defining common reading settings:
                 encoding and format of flags.
    """
    result = dic.Dic(words=[])

    for num, line in source:
        if num == 1 and COUNT_REGEXP.match(line):
            continue

        word, *morph_info = SPACES_REGEXP.split(line)

        # If the word STARTS with "/" -- it is not empty stem + flags, but "word starting with /"
        if word.startswith('/'):
            flags = ''
        else:
            word_with_flags = SLASH_REGEXP.split(word, 1)
            if len(word_with_flags) == 2:
                word, flags = word_with_flags
            else:
                flags = ''

        if r'\/' in word:
            word = word.replace(r'\/', '/')

        result.append(dic.Word(
            stem=word,
            flags=list(dict.fromkeys(context.parse_flags(flags))),
            morph_info=morph_info
        ))

    log.debug('Read %d dictionary entries', len(result))

    return result
