import dataclasses

import pytest

from affixgen.data import aff
from affixgen.data.aff import AffixRule, RuleGroup, RuleKind

SFX = RuleKind.SUFFIX
PFX = RuleKind.PREFIX


def test_compile_condition():
    assert aff.compile_condition('.', SFX) is None
    assert aff.compile_condition('.', PFX) is None

    assert aff.compile_condition('[^aeiou]y', SFX).pattern == '^.*[^aeiou]y$'
    assert aff.compile_condition('y[^aeiou]', PFX).pattern == '^y[^aeiou].*$'

    # Only the single dot is universal
    assert aff.compile_condition('..', SFX) is not None
    assert aff.compile_condition('a.', PFX) is not None


def test_compile_condition_invalid():
    with pytest.raises(aff.InvalidPattern):
        aff.compile_condition('[^aeiou', SFX)

    with pytest.raises(aff.InvalidPattern):
        aff.compile_condition('', PFX)

    # it is still ValueError, for those who don't care about details
    with pytest.raises(ValueError):
        aff.compile_condition('(y', SFX)


def test_condition_equality():
    first = aff.compile_condition('[sxzh]', SFX)
    second = aff.compile_condition('[sxzh]', SFX)

    assert first is not second
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1

    assert first != aff.compile_condition('[sxzh]', PFX)


def test_matches():
    assert aff.matches(None, '')
    assert aff.matches(None, 'anything')

    cond = aff.compile_condition('[^aeiou]y', SFX)
    assert aff.matches(cond, 'xxxy')
    assert not aff.matches(cond, 'xxxay')
    assert not aff.matches(cond, 'xxxyxx')


def test_check_condition():
    rule = AffixRule(SFX, '', condition='[^aeiou]y')
    # General tests, including with pattern in the middle
    assert rule.check_condition('xxxy')
    assert not rule.check_condition('xxxay')
    assert not rule.check_condition('xxxyxx')

    rule = AffixRule(PFX, '', condition='y[^aeiou]')
    assert rule.check_condition('yxxx')
    assert not rule.check_condition('yaxxx')
    assert not rule.check_condition('xxxyxxx')

    # Other real rules
    rule = AffixRule(SFX, '', condition='[sxzh]')
    assert rule.check_condition('access')
    assert rule.check_condition('abyss')
    assert not rule.check_condition('accomplishment')
    assert rule.check_condition('mmms')
    assert not rule.check_condition('mmsmm')

    rule = AffixRule(SFX, '', condition='.')
    assert rule.compiled_condition is None
    assert rule.check_condition('xxx')
    assert rule.check_condition('')


def test_condition_with_range():
    # conditions are compiled as written: "-" inside brackets is a range
    rule = AffixRule(SFX, 's', condition='[a-c]y')
    assert rule.compiled_condition.pattern == '^.*[a-c]y$'
    assert rule.check_condition('xby')
    assert rule.check_condition('xay')
    assert not rule.check_condition('xdy')

    rule = AffixRule(PFX, 're', condition='[a-c]')
    assert rule.check_condition('bake')
    assert not rule.check_condition('make')


def test_condition_trailing_newline():
    # the whole word should match, "\n" at the end is not ignored
    rule = AffixRule(SFX, 'zzz', strip='y', condition='[^aeiou]y')
    assert not rule.check_condition('xxxy\n')
    assert rule.apply('xxxy\n') is None

    rule = AffixRule(PFX, 'zzz', strip='y', condition='y[^aeiou]')
    assert not rule.check_condition('yxxx\n')
    assert rule.apply('yxxx\n') is None

    assert not aff.matches(aff.compile_condition('[sxzh]', SFX), 'bus\n')


def test_invalid_rule():
    with pytest.raises(aff.InvalidPattern):
        AffixRule(SFX, 'zzz', strip='y', condition='[^aeiou')


def test_apply():
    rule = AffixRule(SFX, 'zzz', strip='y', condition='[^aeiou]y')
    assert rule.apply('xxxy') == 'xxxzzz'
    assert rule.apply('xxxay') is None

    rule = AffixRule(PFX, 'zzz', strip='y', condition='y[^aeiou]')
    assert rule.apply('yxxx') == 'zzzxxx'
    assert rule.apply('axxx') is None

    # strip is absent from the word: only attaching
    rule = AffixRule(SFX, 'zzz', strip='y', condition='.')
    assert rule.apply('xxx') == 'xxxzzz'

    rule = AffixRule(PFX, 'un', condition='.')
    assert rule.apply('do') == 'undo'

    # empty affix: only stripping
    rule = AffixRule(SFX, '', strip='e', condition='e')
    assert rule.apply('make') == 'mak'


def test_apply_unicode():
    rule = AffixRule(SFX, 'ів', strip='а', condition='[^ж]а')
    assert rule.apply('хата') == 'хатів'
    assert rule.apply('ножа') is None


def test_rule_normalization():
    assert AffixRule(SFX, 's', strip='').strip is None
    assert AffixRule(SFX, 's', strip='') == AffixRule(SFX, 's')


def test_rule_is_immutable():
    rule = AffixRule(SFX, 'ies', strip='y', condition='[^aeiou]y', morph_info=['is:plural'])
    same = AffixRule(SFX, 'ies', strip='y', condition='[^aeiou]y', morph_info=('is:plural',))

    assert rule.morph_info == ('is:plural',)
    assert rule == same
    assert hash(rule) == hash(same)
    assert len({rule, same, AffixRule(SFX, 's')}) == 2

    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.affix = 'x'


def test_strip_length():
    rule = AffixRule(SFX, 'ies', strip='y', condition='[^aeiou]y')
    assert rule.strip_length('kitty') == 1
    assert rule.strip_length('cat') == 0

    rule = AffixRule(PFX, 'in', strip='im', condition='.')
    assert rule.strip_length('impossible') == 2
    assert rule.strip_length('possible') == 0


def test_rule_repr():
    assert repr(AffixRule(PFX, 'un')) == 'Prefix(un: ^[.])'
    assert repr(AffixRule(SFX, 'ies', strip='y', condition='[^aeiou]y')) == 'Suffix(ies: [[^aeiou]y]y$)'


def test_rule_group_apply():
    group = RuleGroup(
        flag='A',
        kind=SFX,
        can_combine=True,
        rules=[
            AffixRule(SFX, 'iness', strip='y', condition='[^aeiou]y'),
            AffixRule(SFX, 'ness', condition='[aeiou]y'),
            AffixRule(SFX, 'ness', condition='[^y]'),
        ]
    )

    assert group.apply('blurry') == 'blurriness'
    assert group.apply('coy') == 'coyness'
    assert group.apply('acute') == 'acuteness'

    assert group.first_match('coy') == ('coyness', group.rules[1])


def test_rule_group_first_match_wins():
    group = RuleGroup(
        flag='A',
        kind=SFX,
        can_combine=False,
        rules=[
            AffixRule(SFX, 'ies', strip='y', condition='y'),
            AffixRule(SFX, 's', condition='.'),
        ]
    )

    # second rule matches too, but is never consulted
    assert group.apply('spy') == 'spies'
    assert group.apply('cat') == 'cats'


def test_rule_group_no_match():
    group = RuleGroup(flag='A', kind=SFX, can_combine=True, rules=[
        AffixRule(SFX, 'ies', strip='y', condition='[^aeiou]y'),
    ])

    assert group.apply('cat') is None
    assert group.first_match('cat') is None
    assert RuleGroup(flag='B', kind=PFX, can_combine=True).apply('cat') is None


def test_flag_table():
    prefix = RuleGroup(flag='A', kind=PFX, can_combine=True, rules=[AffixRule(PFX, 'aa')])
    suffix = RuleGroup(flag='A', kind=SFX, can_combine=True, rules=[AffixRule(SFX, 'cc')])

    table = aff.FlagTable([prefix, suffix])

    assert table.prefix('A') is prefix
    assert table.suffix('A') is suffix
    assert table.prefix('B') is None
    assert len(table) == 2
    assert list(table) == [prefix, suffix]

    with pytest.raises(ValueError):
        table.add(RuleGroup(flag='A', kind=SFX, can_combine=False))
