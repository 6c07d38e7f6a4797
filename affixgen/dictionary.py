from __future__ import annotations

import glob
import logging

from typing import Dict, List, Optional, Tuple

from affixgen import data, readers
from affixgen.readers.file_reader import FileReader
from affixgen.algo.generator import GenerationResult, WordGenerator
from affixgen.algo.string_metrics import distance_limited

log = logging.getLogger(__name__)


class Dictionary:
    """
    The main interface to ``affixgen`` as a library: dictionary stems expanded with their affixes.

    Usage::

        from affixgen import Dictionary

        # from folder where en_US.aff and en_US.dic are present
        dictionary = Dictionary.from_files('/path/to/dictionary/en_US')

        print(dictionary.lookup('drinkable'))
        # True
        print(dictionary.analyze('drinkable'))
        # ['drinkable = drink + Suffix(able: [.]$)']
        print(dictionary.suggest('drinkible'))
        # ['drinkable']

    **Dictionary creation**

    .. automethod:: from_files
    .. automethod:: from_system
    .. automethod:: installed

    **Dictionary usage**

    .. automethod:: words
    .. automethod:: lookup
    .. automethod:: analyze
    .. automethod:: suggest
    """

    #: Affix groups from ``*.aff``
    table: data.aff.FlagTable
    #: Contents of ``*.dic``
    dic: data.dic.Dic
    generator: WordGenerator

    # TODO: Windows pathes
    PATHES = [
        "/usr/share/hunspell",
        "/usr/share/myspell",
        "/usr/share/myspell/dicts",
        "/Library/Spelling",
    ]

    #: Default limit of edit distance for :meth:`suggest`
    SUGGEST_LIMIT = 3

    @classmethod
    def from_files(cls, path: str, *, skip_invalid: bool = False) -> Dictionary:
        """
        Read dictionary from pair of files ``/some/path/some_name.aff`` and ``/some/path/some_name.dic``.

        Args:
            path: Should be just ``/some/path/some_name``.
            skip_invalid: Skip affix rules with invalid conditions instead of failing
        """

        log.info('Reading dictionary %s', path)

        aff_source = FileReader(path + '.aff')
        try:
            table, context = readers.read_aff(aff_source, skip_invalid=skip_invalid)
        finally:
            aff_source.close()

        dic_source = FileReader(path + '.dic', encoding=context.encoding)
        try:
            dic = readers.read_dic(dic_source, context=context)
        finally:
            dic_source.close()

        return cls(table, dic)

    @classmethod
    def from_system(cls, name: str, **kwargs) -> Dictionary:
        """
        Tries to find ``<name>.aff`` and ``<name>.dic`` on system paths known to store Hunspell dictionaries.
        Probably works only on Linux.

        Args:
            name: Language/dictionary name, like ``en_US``
        """

        for folder in cls.PATHES:
            pathes = glob.glob(f'{folder}/{name}.aff')
            if pathes:
                return cls.from_files(pathes[0][:-len('.aff')], **kwargs)

        raise LookupError(f'{name}.aff not found (search pathes are {cls.PATHES!r})')

    @classmethod
    def installed(cls) -> List[str]:
        """
        Pathes (without extension) of all dictionaries found on system paths.
        """
        return [
            path[:-len('.aff')]
            for folder in cls.PATHES
            for path in sorted(glob.glob(f'{folder}/*.aff'))
        ]

    def __init__(self, table: data.aff.FlagTable, dic: data.dic.Dic):
        self.table = table
        self.dic = dic
        self.generator = WordGenerator(table)

        self._forms: Optional[Dict[str, List[Tuple[data.dic.Word, GenerationResult]]]] = None

    def forms(self) -> Dict[str, List[Tuple[data.dic.Word, GenerationResult]]]:
        """
        All generated forms (not including bare stems), with the dictionary entry and result that
        produced each. Calculated once, on first request.
        """
        if self._forms is None:
            self._forms = {}
            for word in self.dic.words:
                for result in self.generator.generate(word.stem, word.flags):
                    self._forms.setdefault(result.text, []).append((word, result))
            log.debug('Generated %d distinct forms from %d stems', len(self._forms), len(self.dic))
        return self._forms

    def words(self) -> List[str]:
        """
        Sorted list of all the words dictionary knows: stems and their forms.
        """
        return sorted({*self.dic.index, *self.forms()})

    def lookup(self, word: str) -> bool:
        """
        Checks if the word is correct.

        ::

            >>> dictionary.lookup('drinkable')
            True
            >>> dictionary.lookup('drinkible')
            False
        """
        return word in self.dic.index or word in self.forms()

    def analyze(self, word: str) -> List[str]:
        """
        All the ways the word can be produced from dictionary stems, in human-readable form.

        ::

            >>> dictionary.analyze('unsaved')
            ['unsaved = Prefix(un: ^[.]) + save + Suffix(d: [e]$)']
        """
        result = []
        for entry in self.dic.homonyms(word):
            line = entry.stem
            if entry.morph_info:
                line += f" [{' '.join(entry.morph_info)}]"
            result.append(line)

        for entry, form in self.forms().get(word, []):
            result.append(form.analysis(entry.stem))

        return result

    def suggest(self, word: str, limit: int = SUGGEST_LIMIT) -> List[str]:
        """
        Dictionary words closer to the word than ``limit`` edits, best first.
        """
        scored = []
        for candidate in self.words():
            score = distance_limited(word, candidate, limit)
            if score < limit:
                scored.append((score, candidate))

        return [candidate for _, candidate in sorted(scored)]
