"""
The module represents affix rules: the prefix/suffix part of Hunspell's ``*.aff`` file.

Affixes are stored in the file in tables looking this way:

.. code-block:: text

    SFX N Y 3
    SFX N   e     ion        e
    SFX N   y     ication    y
    SFX N   0     en         [^ey]

The first line is the table header: suffix (``PFX`` for prefix), designated by flag ``N``, can be
combined with prefixes (``Y``), 3 rules below. Each of the rules reads "strip this, add that, if the
stem matches the condition". The table becomes :class:`RuleGroup`, each row -- :class:`AffixRule`.

All the objects here are created once, when the ``*.aff`` file is read (see
:meth:`read_aff <affixgen.readers.aff.read_aff>`), and are never changed after that, so they can be
shared between threads freely.

``RuleKind``
------------

.. autoclass:: RuleKind

Conditions
----------

.. autofunction:: compile_condition
.. autofunction:: matches
.. autoclass:: Condition
.. autoclass:: InvalidPattern

``AffixRule`` and ``RuleGroup``
-------------------------------

.. autoclass:: AffixRule
    :members:
.. autoclass:: RuleGroup
    :members:

``FlagTable``
-------------

.. autoclass:: FlagTable
    :members:
"""

import re
from enum import Enum

from dataclasses import dataclass, field
from typing import List, Dict, Iterable, Iterator, Optional, Tuple


class RuleKind(Enum):
    """Which end of the word the rule affects."""
    PREFIX = 'PFX'
    SUFFIX = 'SFX'


class InvalidPattern(ValueError):
    """
    Raised when the rule's condition can't be compiled into a pattern. It is never handled inside
    the rule itself: whoever constructs rules (typically, :mod:`readers.aff <affixgen.readers.aff>`)
    decides whether to fail the whole file or skip the rule.
    """


@dataclass(frozen=True)
class Condition:
    """
    Compiled condition of the affix rule, anchored to the end of the word the rule affects.

    Two conditions are equal (and have the same hash) if their anchored pattern text is the same,
    so they can be used as dictionary keys when deduplicating rules.
    """

    #: Anchored pattern text, like ``^.*[^aeiou]y$``
    pattern: str
    regexp: re.Pattern = field(compare=False, repr=False)

    def match(self, word: str) -> bool:
        # whole word, including a trailing "\n" if present
        return self.regexp.fullmatch(word) is not None


def compile_condition(condition: str, kind: RuleKind) -> Optional[Condition]:
    """
    Compiles rule's condition into :class:`Condition`.

    The condition ``.`` (meaning "any stem", and used by the majority of real-life rules) isn't
    compiled at all: ``None`` is returned, and :func:`matches` treats it as "always matches".

    Other conditions are anchored: prefix condition should match at the start of the word
    (``^cond.*$``), suffix condition at its end (``^.*cond$``).

    Args:
      condition: Condition text, like ``[^aeiou]y``
      kind: Whether the rule is a prefix or suffix

    Raises:
      InvalidPattern: if the condition is empty or not a valid regexp
    """

    if condition == '.':
        return None

    if not condition:
        raise InvalidPattern('Empty affix condition')

    if kind == RuleKind.PREFIX:
        pattern = f'^{condition}.*$'
    else:
        pattern = f'^.*{condition}$'

    try:
        return Condition(pattern, re.compile(pattern))
    except re.error as e:
        raise InvalidPattern(f'Invalid affix condition {condition!r}: {e}') from e


def matches(condition: Optional[Condition], word: str) -> bool:
    """
    Checks the whole word against the (possibly absent) condition.
    """
    if condition is None:
        return True
    return condition.match(word)


@dataclass(frozen=True)
class AffixRule:
    """
    One row of the affix table: single "strip and attach" transformation. For example,

    .. code-block:: text

        SFX S   y     ies        [^aeiou]y

    ...becomes ``AffixRule(RuleKind.SUFFIX, 'ies', strip='y', condition='[^aeiou]y')``, which turns
    "kitty" into "kitties", and doesn't apply to "decoy".
    """

    #: Which end of the word the rule changes
    kind: RuleKind
    #: What is added when the rule applies (can be empty)
    affix: str
    #: What is stripped from the stem when the rule applies (``None`` if nothing)
    strip: Optional[str] = None
    #: Condition against which the stem is checked, in its source form (``.`` for "any stem")
    condition: str = '.'
    #: Morphological tags (like ``is:plural``), passed to generation results as is
    morph_info: Tuple[str, ...] = ()

    def __post_init__(self):
        # frozen dataclass: normalized values are set bypassing __setattr__
        if not self.strip:
            object.__setattr__(self, 'strip', None)
        object.__setattr__(self, 'morph_info', tuple(self.morph_info))

        object.__setattr__(self, 'compiled_condition', compile_condition(self.condition, self.kind))

    def check_condition(self, word: str) -> bool:
        return matches(self.compiled_condition, word)

    def strip_length(self, word: str) -> int:
        """
        How many chars the rule removes from its end of the word (0 if the word doesn't have
        :attr:`strip` at that end).
        """
        if self.strip is None:
            return 0
        if self.kind == RuleKind.SUFFIX and word.endswith(self.strip):
            return len(self.strip)
        if self.kind == RuleKind.PREFIX and word.startswith(self.strip):
            return len(self.strip)
        return 0

    def apply(self, word: str) -> Optional[str]:
        """
        Produces new word form, or ``None`` if the word doesn't satisfy rule's condition.

        ::

            >>> rule = AffixRule(RuleKind.SUFFIX, 'zzz', strip='y', condition='[^aeiou]y')
            >>> rule.apply('xxxy')
            'xxxzzz'
            >>> rule.apply('xxxay') is None
            True
        """
        if not self.check_condition(word):
            return None

        stripped = self.strip_length(word)
        if self.kind == RuleKind.SUFFIX:
            return word[:len(word) - stripped] + self.affix
        return self.affix + word[stripped:]

    def __repr__(self):
        if self.kind == RuleKind.PREFIX:
            return f"Prefix({self.affix}: ^{self.strip or ''}[{self.condition}])"
        return f"Suffix({self.affix}: [{self.condition}]{self.strip or ''}$)"


@dataclass
class RuleGroup:
    """
    All the rules of one affix table, sharing flag and kind.

    Rules are tried in the order they are listed in the file, and the first one that matches is the
    only one applied. Tables are typically written from the most specific rule to the most generic:

    .. code-block:: text

        SFX A Y 3
        SFX A   y     iness      [^aeiou]y
        SFX A   0     ness       [aeiou]y
        SFX A   0     ness       [^y]

    ...so "blurry" becomes "blurriness", "coy" -- "coyness", and "acute" -- "acuteness".
    """

    #: Flag the stems refer this group with
    flag: str
    kind: RuleKind
    #: Whether this group can be applied together with the group of the opposite kind (``Y`` in
    #: table header); both groups should allow it
    can_combine: bool
    rules: List[AffixRule] = field(default_factory=list)

    def first_match(self, word: str) -> Optional[Tuple[str, AffixRule]]:
        """
        Returns the form produced by the first applicable rule, and the rule itself.
        """
        for rule in self.rules:
            result = rule.apply(word)
            if result is not None:
                return (result, rule)
        return None

    def apply(self, word: str) -> Optional[str]:
        match = self.first_match(word)
        return match[0] if match else None


class FlagTable:
    """
    All rule groups of the dictionary, by flag. One flag might designate both a prefix group and a
    suffix group; they are stored separately.

    ::

        >>> table = FlagTable([prefix_group_a, suffix_group_b])
        >>> table.prefix('A')
        RuleGroup(flag='A', kind=<RuleKind.PREFIX: 'PFX'>, ...)
        >>> table.suffix('A') is None
        True
    """

    def __init__(self, groups: Iterable[RuleGroup] = ()):
        self.prefixes: Dict[str, RuleGroup] = {}
        self.suffixes: Dict[str, RuleGroup] = {}

        for group in groups:
            self.add(group)

    def add(self, group: RuleGroup) -> None:
        target = self.prefixes if group.kind == RuleKind.PREFIX else self.suffixes
        if group.flag in target:
            raise ValueError(f'Duplicate {group.kind.value} group for flag {group.flag!r}')
        target[group.flag] = group

    def prefix(self, flag: str) -> Optional[RuleGroup]:
        return self.prefixes.get(flag)

    def suffix(self, flag: str) -> Optional[RuleGroup]:
        return self.suffixes.get(flag)

    def __iter__(self) -> Iterator[RuleGroup]:
        yield from self.prefixes.values()
        yield from self.suffixes.values()

    def __len__(self):
        return len(self.prefixes) + len(self.suffixes)

    def __repr__(self):
        return f'FlagTable(prefixes={sorted(self.prefixes)!r}, suffixes={sorted(self.suffixes)!r})'
