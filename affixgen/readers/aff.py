"""
Reading of the prefix/suffix part of Hunspell's ``*.aff`` file.

Only directives relevant for producing word forms are read: ``SET`` (encoding), ``FLAG`` (flag
format), ``PFX`` and ``SFX`` (affix tables). Everything else is ignored: that's how Hunspell itself
works, ``.aff`` file can contain literally anything besides known directives (even comments are
implemented this way, and not by scanning for ``#``).

.. autofunction:: read_aff

.. autoclass:: Context
    :members:

Internal methods
^^^^^^^^^^^^^^^^

.. autofunction:: read_affix_table
.. autofunction:: make_rule
"""

import re
import logging
import itertools
from dataclasses import dataclass
from typing import List, Optional, Tuple, Iterable

from affixgen.data.aff import AffixRule, FlagTable, InvalidPattern, RuleGroup, RuleKind

from affixgen.readers.file_reader import FileReader

log = logging.getLogger(__name__)

FLAG_LONG_REGEXP = re.compile(r'..')
FLAG_NUM_REGEXP = re.compile(r'\d+(?=,|$)')
SPACES_REGEXP = re.compile(r'\s+')

FLAG_FORMATS = ('short', 'long', 'num', 'UTF-8')


@dataclass
class Context:
    """
    Class containing reading-time settings necessary for reading both .aff and .dic file:
    encoding and flag format.

    It is created in :meth:`read_aff` and then reused in :meth:`read_dic <affixgen.readers.dic.read_dic>`.
    """

    #: Encoding of dictionary (``SET`` directive)
    encoding: str = 'Windows-1252'

    #: Flag format of dictionary (``FLAG`` directive): ``short`` (one char), ``long`` (two chars),
    #: ``num`` (comma-separated numbers) or ``UTF-8`` (one Unicode char)
    flag_format: str = 'short'

    #: Whether rules with invalid conditions should be skipped (with warning) instead of failing
    #: the whole file
    skip_invalid: bool = False

    def parse_flag(self, string: str) -> str:
        """
        Parse singular flag, considering attr:`flag_format`.
        """
        flags = self.parse_flags(string)
        if not flags:
            raise ValueError(f'Empty flag {string!r}')
        return flags[0]

    def parse_flags(self, string: Optional[str]) -> List[str]:
        """
        Parse set of flags, considering attr:`flag_format`.
        """

        if not string:
            return []

        if self.flag_format in ('short', 'UTF-8'):
            return list(string)
        if self.flag_format == 'long':
            return FLAG_LONG_REGEXP.findall(string)
        if self.flag_format == 'num':
            return FLAG_NUM_REGEXP.findall(string)

        raise ValueError(f"Unknown flag format {self.flag_format}")


def read_aff(source: FileReader, *, skip_invalid: bool = False) -> Tuple[FlagTable, Context]:
    """
    Reads .aff file and creates a :class:`FlagTable <affixgen.data.aff.FlagTable>` of all affix
    tables in it.

    Args:
         source: Reader (thin wrapper around opened file, targeting line-by-line reading)
         skip_invalid: Skip rules with conditions that can't be compiled, instead of raising

    Returns:
        Flag table and a :class:`Context` which then will be reused in
        :meth:`read_dic <affixgen.readers.dic.read_dic>`

    Raises:
        InvalidPattern: if some rule's condition is invalid (and ``skip_invalid`` is not set)
        ValueError: if the affix table is malformed
    """

    table = FlagTable()
    context = Context(skip_invalid=skip_invalid)

    for (num, line) in source:
        name, *values = SPACES_REGEXP.split(line)

        if name == 'SET' and values:
            context.encoding = values[0]
            source.reset_encoding(context.encoding)
        elif name == 'FLAG' and values:
            if values[0] not in FLAG_FORMATS:
                raise ValueError(f'Line {num}: unknown flag format {values[0]!r}')
            context.flag_format = values[0]
            if values[0] == 'UTF-8':
                # Weirdly enough, **flag type** ``UTF-8`` implicitly states the encoding is ``UTF-8`` too...
                context.encoding = 'UTF-8'
                source.reset_encoding('UTF-8')
        elif name in ('PFX', 'SFX'):
            group = read_affix_table(source, num, name, *values, context=context)
            table.add(group)
            log.debug('Read %s group %r with %d rules', name, group.flag, len(group.rules))

    log.debug('Read %d affix groups', len(table))

    return (table, context)


def read_affix_table(source: Iterable[Tuple[int, str]], num: int, directive: str, *values: str,
                     context: Context) -> RuleGroup:
    """
    Reads the table of affixes. Header (passed as ``values``) is already read from the source,
    the rest of the table is read from ``source``:

    .. code-block:: text

        SFX S Y 4           # table header: flag, whether it can be combined, number of rules
        SFX S   y     ies        [^aeiou]y
        SFX S   0     s          [aeiou]y
        SFX S   0     es         [sxzh]
        SFX S   0     s          [^sxzhy]
    """

    if len(values) < 3 or not values[2].isdigit():
        raise ValueError(f'Line {num}: malformed {directive} table header {values!r}')

    flag, can_combine, count, *_ = values
    kind = RuleKind(directive)
    group = RuleGroup(flag=context.parse_flag(flag), kind=kind, can_combine=(can_combine == 'Y'))

    for line_no, line in itertools.islice(source, int(count)):
        row = SPACES_REGEXP.split(line)
        if row[0] != directive or len(row) < 4:
            raise ValueError(f'Line {line_no}: expected {directive} rule for flag {flag}, got {line!r}')

        try:
            group.rules.append(make_rule(kind, *row[2:]))
        except InvalidPattern as e:
            if not context.skip_invalid:
                raise InvalidPattern(f'Line {line_no}: {e}') from e
            log.warning('Line %d: skipping %s rule: %s', line_no, directive, e)

    return group


def make_rule(kind: RuleKind, strip: str, add: str, *rest: str) -> AffixRule:
    """
    Produces :class:`AffixRule <affixgen.data.aff.AffixRule>` from raw data of the table row.
    ``0`` in strip or affix position means empty string.
    """

    # Some real-life dictionaries have rules without any condition
    condition = rest[0] if rest else '.'
    # Continuation flags (``add/flags``) are for secondary affixes, which are not produced
    add, _, _ = add.partition('/')

    return AffixRule(
        kind=kind,
        affix=('' if add == '0' else add),
        strip=(None if strip == '0' else strip),
        condition=condition,
        morph_info=tuple(rest[1:])
    )
