"""
条件文（「〜において」の〜部分）パーサのテスト
"""
import pytest
from lawabbrev.core.errors import UnrecognizedScopeError
from lawabbrev.core.scope_note import (
    NextScope,
    PlainLink,
    RangeNote,
    ScopeLevel,
    SingleNote,
    SupplementaryLink,
    ThisScope,
    parse_scope_notes,
    parse_scope_reference,
)


class TestParseScopeReference:

    @pytest.mark.parametrize("text, level", [
        ("この条", ScopeLevel.ARTICLE),
        ("本条", ScopeLevel.ARTICLE),
        ("この項", ScopeLevel.PARAGRAPH),
        ("本号", ScopeLevel.ITEM),
        ("この節", ScopeLevel.SUB_ITEM),
        ("この記載要領", ScopeLevel.DRAFTING_NOTE),
    ])
    def test_this(self, text, level):
        assert parse_scope_reference(text) == ThisScope(level)

    @pytest.mark.parametrize("text, level", [
        ("次条", ScopeLevel.ARTICLE),
        ("次項", ScopeLevel.PARAGRAPH),
        ("次号", ScopeLevel.ITEM),
    ])
    def test_next(self, text, level):
        assert parse_scope_reference(text) == NextScope(level)

    @pytest.mark.parametrize("text, expected", [
        ("この条第二項", ThisScope(ScopeLevel.ARTICLE)),
        ("本条第一項", ThisScope(ScopeLevel.ARTICLE)),
        ("次条第一項", NextScope(ScopeLevel.ARTICLE)),
        ("この項第三号", ThisScope(ScopeLevel.PARAGRAPH)),
    ])
    def test_this_or_next_with_qualifier(self, text, expected):
        """この/本/次＋単位で始まれば後続の条項番号があっても同じ扱い"""
        assert parse_scope_reference(text) == expected

    def test_suppl_provision_link(self):
        assert parse_scope_reference("附則第三条") == SupplementaryLink("第三条")

    def test_suppl_provision_alone(self):
        assert parse_scope_reference("附則") == SupplementaryLink("")

    @pytest.mark.parametrize("text, locator", [
        ("附則別表第一", "別表第一"),
        ("附則第三条第二号ロ(1)", "第三条第二号ロ(1)"),
        ("附則同条", "同条"),
    ])
    def test_suppl_provision_keeps_remainder(self, text, locator):
        """附則で始まれば残りはそのまま保持する"""
        assert parse_scope_reference(text) == SupplementaryLink(locator)

    @pytest.mark.parametrize("text", ["第七条の二", "第三項第一号", "イ", "第十二条第二項"])
    def test_plain_link(self, text):
        assert parse_scope_reference(text) == PlainLink(text)

    @pytest.mark.parametrize("text", ["同条", "前条", "この章", "", "当該規定"])
    def test_unrecognized(self, text):
        with pytest.raises(UnrecognizedScopeError) as exc_info:
            parse_scope_reference(text)
        assert exc_info.value.segment == text


class TestParseScopeNotes:

    def test_single_this(self):
        assert parse_scope_notes("この条") == [SingleNote(ThisScope(ScopeLevel.ARTICLE))]

    def test_single_next(self):
        assert parse_scope_notes("次項") == [SingleNote(NextScope(ScopeLevel.PARAGRAPH))]

    def test_range(self):
        assert parse_scope_notes("第五条から第七条まで") == [
            RangeNote(PlainLink("第五条"), PlainLink("第七条"))
        ]

    def test_suppl_provision_range(self):
        assert parse_scope_notes("附則第三条から第五条まで") == [
            RangeNote(SupplementaryLink("第三条"), PlainLink("第五条"))
        ]

    def test_list_preserves_order(self):
        """列挙は記述順に並ぶ"""
        assert parse_scope_notes("この条及び次条") == [
            SingleNote(ThisScope(ScopeLevel.ARTICLE)),
            SingleNote(NextScope(ScopeLevel.ARTICLE)),
        ]

    def test_mixed_delimiters(self):
        notes = parse_scope_notes("第二条、第五条から第七条まで並びに附則第二条")
        assert notes == [
            SingleNote(PlainLink("第二条")),
            RangeNote(PlainLink("第五条"), PlainLink("第七条")),
            SingleNote(SupplementaryLink("第二条")),
        ]

    def test_qualified_list(self):
        assert parse_scope_notes("この条第二項及び附則別表第一") == [
            SingleNote(ThisScope(ScopeLevel.ARTICLE)),
            SingleNote(SupplementaryLink("別表第一")),
        ]

    def test_empty_is_error(self):
        with pytest.raises(UnrecognizedScopeError):
            parse_scope_notes("")

    def test_unrecognized_segment_is_error(self):
        with pytest.raises(UnrecognizedScopeError) as exc_info:
            parse_scope_notes("この条及び同項")
        assert exc_info.value.segment == "同項"


class TestToDict:

    def test_single(self):
        note = SingleNote(ThisScope(ScopeLevel.ARTICLE))
        assert note.to_dict() == {"kind": "single", "note": {"type": "this", "level": "article"}}

    def test_range(self):
        note = RangeNote(SupplementaryLink("第三条"), PlainLink("第五条"))
        assert note.to_dict() == {
            "kind": "range",
            "start": {"type": "suppl_link", "locator": "第三条"},
            "end": {"type": "link", "locator": "第五条"},
        }
