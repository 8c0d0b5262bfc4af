"""
lawabbrev ユーティリティモジュール
"""

from .numerals import kanji_to_int
from .law_num import normalize_law_num
from .span import Span, match_to_span

__all__ = [
    # numerals
    'kanji_to_int',
    # law_num
    'normalize_law_num',
    # span
    'Span',
    'match_to_span',
]
