"""
Producing word forms from the dictionary stem and its flags ("unmunching" in Hunspell's terms).

If the dictionary has ``drink/XA``, and ``*.aff`` has

.. code-block:: text

    PFX A Y 1
    PFX A   0     re         .

    SFX X Y 1
    SFX X   0     able       .

...then the generator produces "redrink", "drinkable" and "redrinkable": every prefix group,
every suffix group, and every prefix+suffix pair where both groups allow combining.

.. autoclass:: WordGenerator
    :members:

.. autoclass:: GenerationResult
    :members:
"""

from dataclasses import dataclass
from typing import List, Iterable, Optional

from affixgen.data.aff import AffixRule, FlagTable, RuleGroup


@dataclass
class GenerationResult:
    """
    One form produced by :meth:`WordGenerator.generate`. Rules are references to objects in the
    generator's flag table.
    """

    text: str
    prefix: Optional[AffixRule] = None
    suffix: Optional[AffixRule] = None

    def morph_info(self) -> List[str]:
        """Morphological tags of the contributing rules: prefix tags, then suffix tags."""
        tags: List[str] = []
        if self.prefix:
            tags.extend(self.prefix.morph_info)
        if self.suffix:
            tags.extend(self.suffix.morph_info)
        return tags

    def analysis(self, stem: str) -> str:
        """
        Human-readable breakdown of the form, like ``unsaved = Prefix(un: ^[.]) + save + Suffix(d: [e]$) [ds:ed]``
        """
        result = f'{self.text} = '
        if self.prefix:
            result += f'{self.prefix!r} + '
        result += stem
        if self.suffix:
            result += f' + {self.suffix!r}'
        tags = self.morph_info()
        if tags:
            result += f" [{' '.join(tags)}]"
        return result

    def __str__(self):
        return self.text


class WordGenerator:
    """
    Produces all forms of the stem with given flags. Holds the flag table read-only, so one generator
    can be used from several threads.

    ::

        >>> generator = WordGenerator(table)
        >>> [res.text for res in generator.generate('xxx', ['A', 'B'])]
        ['aaxxx', 'xxxcc', 'aaxxxcc']
    """

    def __init__(self, table: FlagTable):
        self.table = table

    def generate(self, stem: str, flags: Iterable[str]) -> List[GenerationResult]:
        """
        Results are ordered: forms with single prefix, then forms with single suffix, then combined
        forms. Flags not present in the table are ignored.

        Args:
          stem: Dictionary stem
          flags: Flags the stem has (repetitions are ignored)
        """

        # dict.fromkeys to drop repeating flags but keep their order
        unique_flags = list(dict.fromkeys(flags))

        prefixes: List[RuleGroup] = [
            group for group in map(self.table.prefix, unique_flags) if group is not None
        ]
        suffixes: List[RuleGroup] = [
            group for group in map(self.table.suffix, unique_flags) if group is not None
        ]

        # Each group is applied to the original stem only once; both single and combined forms
        # reuse this first match
        prefixed = [(group, group.first_match(stem)) for group in prefixes]
        suffixed = [(group, group.first_match(stem)) for group in suffixes]

        result = []
        for _, match in prefixed:
            if match:
                text, rule = match
                result.append(GenerationResult(text, prefix=rule))
        for _, match in suffixed:
            if match:
                text, rule = match
                result.append(GenerationResult(text, suffix=rule))

        for pgroup, pmatch in prefixed:
            if not pmatch or not pgroup.can_combine:
                continue
            for sgroup, smatch in suffixed:
                if not smatch or not sgroup.can_combine:
                    continue
                combined = self.combine(stem, pmatch[1], smatch[1])
                if combined is not None:
                    result.append(GenerationResult(combined, prefix=pmatch[1], suffix=smatch[1]))

        return result

    @staticmethod
    def combine(stem: str, prefix: AffixRule, suffix: AffixRule) -> Optional[str]:
        """
        Applies both rules at once, each one to its own end of the original stem, as if the other
        one isn't there. Returns ``None`` if parts stripped by the rules overlap.
        """
        head = prefix.strip_length(stem)
        tail = len(stem) - suffix.strip_length(stem)
        if head > tail:
            return None
        return prefix.affix + stem[head:tail] + suffix.affix
