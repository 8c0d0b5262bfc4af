from typing import Dict

KANJI_TO_DIGIT: Dict[str, int] = {
    '〇': 0, '零': 0,
    '一': 1, '壱': 1,
    '二': 2, '弐': 2,
    '三': 3, '参': 3,
    '四': 4,
    '五': 5,
    '六': 6,
    '七': 7,
    '八': 8,
    '九': 9,
}

UNIT_MAP: Dict[str, int] = {
    '十': 10,
    '百': 100,
    '千': 1000,
    '万': 10000,
}


def kanji_to_int(text: str) -> int:
    """
    漢数字を整数に変換

    位取り形式（二十三 → 23）と連結形式（一一 → 11）の両方に対応。
    「元」は元年の意味で 1 として扱う。

    Examples:
        >>> kanji_to_int('二十八')
        28
        >>> kanji_to_int('百二')
        102
        >>> kanji_to_int('一一')
        11
        >>> kanji_to_int('元')
        1
    """
    if not text:
        return 0
    if text.isdigit():
        return int(text)
    if text == '元':
        return 1

    if any(c in UNIT_MAP for c in text):
        total = 0
        current = 0
        for char in text:
            if char in KANJI_TO_DIGIT:
                current = KANJI_TO_DIGIT[char]
            elif char in UNIT_MAP:
                total += (current or 1) * UNIT_MAP[char]
                current = 0
        return total + current

    digits = ''.join(str(KANJI_TO_DIGIT[c]) for c in text if c in KANJI_TO_DIGIT)
    return int(digits) if digits else 0
