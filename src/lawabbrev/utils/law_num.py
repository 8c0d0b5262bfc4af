"""
法令番号の正規化ユーティリティ

- 平成二十八年法律第十三号 → H28_L13
- 令和元年政令第四十四号 → R1_CO44
"""

import re
from typing import Dict

from .numerals import kanji_to_int

ERA_TO_CODE: Dict[str, str] = {
    '明治': 'M', '大正': 'T', '昭和': 'S', '平成': 'H', '令和': 'R'
}

# 法令の種別 → キー用コード（e-Gov の法令ID体系の略号に合わせる）
LAW_KIND_TO_CODE: Dict[str, str] = {
    '法律': 'L',
    '政令': 'CO',
    '勅令': 'IO',
}

LAW_NUM_PATTERN = re.compile(
    r'(明治|大正|昭和|平成|令和)([元〇一二三四五六七八九十百千\d]+)年'
    r'.*?(法律|政令|勅令)第([〇一二三四五六七八九十百千\d]+)号'
)


def normalize_law_num(raw_num: str) -> str:
    """
    法令番号を正規化キーに変換

    Args:
        raw_num: '平成二十八年法律第十三号' など

    Returns:
        'H28_L13' 形式。解釈できない場合は記号をアンダースコアに置換した文字列

    Examples:
        >>> normalize_law_num('平成二十八年法律第十三号')
        'H28_L13'
        >>> normalize_law_num('昭和二十二年政令第十六号')
        'S22_CO16'
        >>> normalize_law_num('H28_L13')
        'H28_L13'
    """
    if re.match(r'^[MTSHR]\d+_[A-Z]+\d+$', raw_num):
        return raw_num

    match = LAW_NUM_PATTERN.search(raw_num)
    if match:
        era = ERA_TO_CODE[match.group(1)]
        year = kanji_to_int(match.group(2))
        kind = LAW_KIND_TO_CODE[match.group(3)]
        num = kanji_to_int(match.group(4))
        return f"{era}{year}_{kind}{num}"

    return re.sub(r'[^\w]', '_', raw_num)
