"""
Row Name Normalizer

Vendors label the same row as "VII", "Rząd 7" or "7". Everything is reduced to a
comparable form: an Arabic numeral string when a numeral can be found, otherwise
the trimmed lower-cased label.
"""

import re


ROMAN_NUMERALS: dict[str, int] = {
    'I': 1, 'II': 2, 'III': 3, 'IV': 4, 'V': 5,
    'VI': 6, 'VII': 7, 'VIII': 8, 'IX': 9, 'X': 10,
    'XI': 11, 'XII': 12, 'XIII': 13, 'XIV': 14, 'XV': 15,
    'XVI': 16, 'XVII': 17, 'XVIII': 18, 'XIX': 19, 'XX': 20,
    'XXI': 21, 'XXII': 22, 'XXIII': 23, 'XXIV': 24, 'XXV': 25,
    'XXVI': 26, 'XXVII': 27, 'XXVIII': 28, 'XXIX': 29, 'XXX': 30,
}  # fmt: skip

# Arabic may be glued to a prefix ("A12"), Roman must not follow a letter ("STALL")
_TRAILING_ARABIC = re.compile(r'([0-9]+)$')
_TRAILING_ROMAN = re.compile(r'(?<![^\W\d_])([IVXLC]+)$')


def normalize_row_name(row: str) -> str:
    trimmed = row.strip()
    upper = trimmed.upper()

    if upper in ROMAN_NUMERALS:
        return str(ROMAN_NUMERALS[upper])

    if match := _TRAILING_ARABIC.search(upper):
        return match.group(1).lstrip('0') or '0'

    if (match := _TRAILING_ROMAN.search(upper)) and match.group(1) in ROMAN_NUMERALS:
        return str(ROMAN_NUMERALS[match.group(1)])

    return trimmed.lower()
