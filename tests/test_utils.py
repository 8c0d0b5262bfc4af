"""
ユーティリティ（漢数字・法令番号・Span）のテスト
"""
import re

import pytest
from lawabbrev.utils import Span, kanji_to_int, match_to_span, normalize_law_num


class TestKanjiToInt:

    @pytest.mark.parametrize("text, expected", [
        ("二十八", 28),
        ("十三", 13),
        ("百二", 102),
        ("三百三十三", 333),
        ("千二百三十四", 1234),
        ("一一", 11),
        ("元", 1),
        ("12", 12),
        ("", 0),
    ])
    def test_kanji_to_int(self, text, expected):
        assert kanji_to_int(text) == expected


class TestNormalizeLawNum:

    @pytest.mark.parametrize("raw, expected", [
        ("平成二十八年法律第十三号", "H28_L13"),
        ("令和元年法律第四十四号", "R1_L44"),
        ("昭和二十二年政令第十六号", "S22_CO16"),
        ("明治四十年法律第四十五号", "M40_L45"),
        ("H28_L13", "H28_L13"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_law_num(raw) == expected

    def test_unknown_format_sanitized(self):
        assert normalize_law_num("昭和二十二年厚生省令第一号") == "昭和二十二年厚生省令第一号"
        assert normalize_law_num("a/b c") == "a_b_c"


class TestSpan:

    def test_match_to_span_group(self):
        text = "以下「民法」という。"
        match = re.search(r'「(?P<name>[^」]*)」', text)
        span = match_to_span(match, 'name')
        assert span == Span(3, 5)
        assert text[span.start:span.end] == "民法"

    def test_whole_match(self):
        match = re.search(r'民法', "新民法")
        assert match_to_span(match) == Span(1, 3)

    def test_invalid_span(self):
        with pytest.raises(ValueError):
            Span(5, 3)
        with pytest.raises(ValueError):
            Span(-1, 0)

    def test_to_dict(self):
        assert Span(2, 4).to_dict() == {"start": 2, "end": 4}
