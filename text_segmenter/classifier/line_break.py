"""UAX #14 line breaking over the ``Line_Break`` property data from :mod:`uniseg`.

The property values are resolved as LB1 prescribes before the pair rules run.
The pair rules follow the default (locale independent) algorithm, rules LB4
to LB31. Hebrew letters (LB21a/LB21b) and the Brahmic rule LB28a are not
tailored: HL and the aksara classes behave as AL, viramas as CM. Complex
context scripts (SA) resolve to AL or CM.
"""
from __future__ import annotations

import unicodedata
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

from uniseg.linebreak import line_break


class LineBreakClass(str, Enum):
    """Resolved line breaking classes (after LB1)."""

    BK = "BK"  # mandatory break
    CR = "CR"
    LF = "LF"
    NL = "NL"
    SP = "SP"
    ZW = "ZW"  # zero width space
    WJ = "WJ"  # word joiner
    ZWJ = "ZWJ"
    GL = "GL"  # non-breaking glue
    CM = "CM"  # combining mark
    B2 = "B2"  # break opportunity before and after
    BA = "BA"  # break after
    BB = "BB"  # break before
    HY = "HY"  # hyphen
    CB = "CB"  # contingent break
    CL = "CL"  # close punctuation
    CP = "CP"  # close parenthesis
    EX = "EX"  # exclamation/interrogation
    IN = "IN"  # inseparable
    IS = "IS"  # infix numeric separator
    NS = "NS"  # nonstarter
    NU = "NU"  # numeric
    OP = "OP"  # open punctuation
    PO = "PO"  # postfix numeric
    PR = "PR"  # prefix numeric
    QU = "QU"  # quotation
    SY = "SY"  # symbols allowing break after
    AL = "AL"  # alphabetic
    ID = "ID"  # ideographic
    EB = "EB"  # emoji base
    EM = "EM"  # emoji modifier
    RI = "RI"  # regional indicator
    H2 = "H2"  # Hangul LV syllable
    H3 = "H3"  # Hangul LVT syllable
    JL = "JL"  # Hangul leading jamo
    JV = "JV"  # Hangul vowel jamo
    JT = "JT"  # Hangul trailing jamo


LB = LineBreakClass

# Property values with no class of their own here. CJ resolves to NS.
RESOLVED_CLASSES: Mapping[str, LineBreakClass] = {
    "AI": LB.AL,
    "SG": LB.AL,
    "XX": LB.AL,
    "CJ": LB.NS,
    "HL": LB.AL,
    "AK": LB.AL,
    "AP": LB.AL,
    "AS": LB.AL,
    "VF": LB.CM,
    "VI": LB.CM,
}

# Unassigned code points in these blocks default to ID.
_ID_DEFAULT_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFAFF),
    (0x1F000, 0x1FFFD),
    (0x20000, 0x2FFFD),
    (0x30000, 0x3FFFD),
)

_HANGUL = (LB.JL, LB.JV, LB.JT, LB.H2, LB.H3)

# LB26
_HANGUL_PAIRS = frozenset(
    {
        (LB.JL, LB.JL), (LB.JL, LB.JV), (LB.JL, LB.H2), (LB.JL, LB.H3),
        (LB.JV, LB.JV), (LB.JV, LB.JT), (LB.H2, LB.JV), (LB.H2, LB.JT),
        (LB.JT, LB.JT), (LB.H3, LB.JT),
    }
)

# LB25, pair form
_NUMERIC_PAIRS = frozenset(
    {
        (LB.CL, LB.PO), (LB.CP, LB.PO), (LB.CL, LB.PR), (LB.CP, LB.PR),
        (LB.NU, LB.PO), (LB.NU, LB.PR), (LB.PO, LB.OP), (LB.PO, LB.NU),
        (LB.PR, LB.OP), (LB.PR, LB.NU), (LB.HY, LB.NU), (LB.IS, LB.NU),
        (LB.NU, LB.NU), (LB.SY, LB.NU),
    }
)

_HARD_BREAKS = (LB.BK, LB.CR, LB.LF, LB.NL)


def build_resolution_table(resolved: Mapping[str, LineBreakClass] = RESOLVED_CLASSES) -> Dict[str, LineBreakClass]:
    """Map every ``Line_Break`` property value to the class the pair rules use."""
    table: Dict[str, LineBreakClass] = {line_class.value: line_class for line_class in LineBreakClass}
    table.update(resolved)
    return table


def derive_line_break_class(char: str, resolution: Mapping[str, LineBreakClass]) -> LineBreakClass:
    """Return the resolved line breaking class of a single character."""
    value = line_break(char).value
    if value == "SA":
        return LB.CM if unicodedata.category(char) in ("Mn", "Mc") else LB.AL
    if value == "XX" and unicodedata.category(char) == "Cn":
        code_point = ord(char)
        if any(start <= code_point <= end for start, end in _ID_DEFAULT_RANGES):
            return LB.ID
    return resolution.get(value, LB.AL)


def _allows_break(
    before: LineBreakClass,
    previous: LineBreakClass,
    before_spaces: LineBreakClass,
    current: LineBreakClass,
    regional_run: int,
    current_is_wide: bool,
) -> bool:
    """Decide the pair rules between two adjacent characters.

    ``before`` is the class of the preceding character with combining marks
    folded into their base (LB9/LB10), ``previous`` the raw class of the
    preceding character and ``before_spaces`` the class of the last
    non-space character.
    """
    if previous == LB.BK:
        return True
    if previous == LB.CR and current == LB.LF:
        return False
    if previous in (LB.CR, LB.LF, LB.NL):
        return True
    if current in _HARD_BREAKS:
        return False
    if current in (LB.SP, LB.ZW):
        return False
    if before_spaces == LB.ZW:
        return True
    if previous == LB.ZWJ:
        return False
    if current in (LB.CM, LB.ZWJ):
        if previous != LB.SP:
            return False
        current = LB.AL
    if current == LB.WJ or before == LB.WJ:
        return False
    if before == LB.GL:
        return False
    if current == LB.GL and before not in (LB.SP, LB.BA, LB.HY):
        return False
    if current in (LB.CL, LB.CP, LB.EX, LB.IS, LB.SY):
        return False
    if before_spaces == LB.OP:
        return False
    if before_spaces == LB.QU and current == LB.OP:
        return False
    if before_spaces in (LB.CL, LB.CP) and current == LB.NS:
        return False
    if before_spaces == LB.B2 and current == LB.B2:
        return False
    if before == LB.SP:
        return True
    if current == LB.QU or before == LB.QU:
        return False
    if current == LB.CB or before == LB.CB:
        return True
    if current in (LB.BA, LB.HY, LB.NS) or before == LB.BB:
        return False
    if current == LB.IN:
        return False
    if (before, current) in ((LB.AL, LB.NU), (LB.NU, LB.AL)):
        return False
    if before == LB.PR and current in (LB.ID, LB.EB, LB.EM):
        return False
    if before in (LB.ID, LB.EB, LB.EM) and current == LB.PO:
        return False
    if before in (LB.PR, LB.PO) and current == LB.AL:
        return False
    if before == LB.AL and current in (LB.PR, LB.PO):
        return False
    if (before, current) in _NUMERIC_PAIRS:
        return False
    if (before, current) in _HANGUL_PAIRS:
        return False
    if (before in _HANGUL and current == LB.PO) or (before == LB.PR and current in _HANGUL):
        return False
    if before == LB.AL and current == LB.AL:
        return False
    if before == LB.IS and current == LB.AL:
        return False
    if before in (LB.AL, LB.NU) and current == LB.OP and not current_is_wide:
        return False
    if before == LB.CP and current in (LB.AL, LB.NU):
        return False
    if before == LB.RI and current == LB.RI and regional_run % 2 == 1:
        return False
    if before == LB.EB and current == LB.EM:
        return False
    return True


def compute_break_opportunities(text: str, classes: Sequence[LineBreakClass]) -> List[bool]:
    """Return, for each index, whether a break is allowed right after it.

    The final position always allows a break (LB3).
    """
    length = len(text)
    if length == 0:
        return []

    result = [False] * length
    result[-1] = True

    previous = classes[0]
    before = LB.AL if previous in (LB.CM, LB.ZWJ) else previous
    before_spaces = before
    regional_run = 1 if before == LB.RI else 0

    for index in range(1, length):
        current = classes[index]
        wide = current == LB.OP and unicodedata.east_asian_width(text[index]) in ("F", "W", "H")
        result[index - 1] = _allows_break(before, previous, before_spaces, current, regional_run, wide)

        if current in (LB.CM, LB.ZWJ) and previous not in (*_HARD_BREAKS, LB.SP, LB.ZW):
            # combining sequence: the base keeps its class
            previous = current
            continue

        effective = LB.AL if current in (LB.CM, LB.ZWJ) else current
        regional_run = regional_run + 1 if effective == LB.RI else 0
        previous = current
        before = effective
        if effective != LB.SP:
            before_spaces = effective

    return result


def iter_breakables(text: str, opportunities: Sequence[bool]) -> Iterator[str]:
    """Yield the fragments of ``text`` delimited by allowed breaks."""
    start = 0
    for index, allowed in enumerate(opportunities):
        if allowed:
            yield text[start:index + 1]
            start = index + 1
    if start < len(text):
        yield text[start:]
