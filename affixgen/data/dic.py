"""
The module represents data from Hunspell's ``*.dic`` file.

This text file has the following format:

.. code-block:: text

    124

    cat/ABC po:noun
    drink/X

The first line is (optional) number of entries. Each entry is the stem, then (optionally) its flags
after ``/``, then (optionally) morphological tags. The meaning of flags is defined by the rule groups
of the corresponding ``*.aff`` file.

``Dic`` is read by :meth:`read_dic <affixgen.readers.dic.read_dic>`.

.. autoclass:: Dic
.. autoclass:: Word
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import List, Dict


@dataclass
class Word:
    """
    One word (stem) of a .dic file.
    """

    #: Word's stem
    stem: str
    #: Flags in the order they are listed in the file, without repetitions
    flags: List[str] = field(default_factory=list)
    #: Morphological tags after the stem, like ``['po:noun']``
    morph_info: List[str] = field(default_factory=list)

    def __repr__(self):
        return f"Word({self.stem}{'/' + ''.join(self.flags) if self.flags else ''})"


@dataclass
class Dic:
    """
    Contents of the .dic file: list of words, and an index to fetch them by stem (several entries
    might share the stem, for example with different morphology).
    """

    words: List[Word]

    def __post_init__(self):
        self.index: Dict[str, List[Word]] = defaultdict(list)

        for word in self.words:
            self.index[word.stem].append(word)

    def homonyms(self, stem: str) -> List[Word]:
        return self.index.get(stem, [])

    def append(self, word: Word):
        self.words.append(word)
        self.index[word.stem].append(word)

    def __len__(self):
        return len(self.words)
