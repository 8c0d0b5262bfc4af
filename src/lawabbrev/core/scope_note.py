"""
略称の適用範囲を限定する条件文（「この条において」等）のパーサ

入力は「において」の直前までの文字列（例: 'この条', '次項', '附則第三条',
'第五条から第七条まで', 'この条及び次条'）。
列挙（、/及び/並びに）で分割し、各要素を単一の参照または
「AからBまで」の範囲として構造化する。出力順は本文の記述順を保つ。
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Union

from .errors import UnrecognizedScopeError


class ScopeLevel(str, Enum):
    """条件文が指す単位"""
    DRAFTING_NOTE = "drafting_note"  # 記載要領
    ARTICLE = "article"              # 条
    PARAGRAPH = "paragraph"          # 項
    ITEM = "item"                    # 号
    SUB_ITEM = "sub_item"            # 節


LEVEL_KEYWORDS: Dict[str, ScopeLevel] = {
    '記載要領': ScopeLevel.DRAFTING_NOTE,
    '条': ScopeLevel.ARTICLE,
    '項': ScopeLevel.PARAGRAPH,
    '号': ScopeLevel.ITEM,
    '節': ScopeLevel.SUB_ITEM,
}

# ==============================================================================
# パターン定義
# ==============================================================================

# 列挙の区切り
LIST_DELIMITER_PATTERN = re.compile(r'、|及び|並びに')

# 「AからBまで」
RANGE_PATTERN = re.compile(r'(?P<start>.+?)から(?P<end>.+?)まで')

# 「この条」「本項」「次号」
THIS_OR_NEXT_PATTERN = re.compile(
    r'(?P<this_or_next>この|本|次)(?P<level>記載要領|条|項|号|節)'
)

SUPPL_PROVISION_PREFIX = '附則'

# 条項の所在を示す文字列（第七条の二, 第三項第一号, イ）
LOCATOR_PATTERN = re.compile(r'[次の第条項号節〇一二三四五六七八九十百千ア-ン]+')


# ==============================================================================
# 参照（ScopeReference）
# ==============================================================================

@dataclass(frozen=True)
class ThisScope:
    """この条や本項などの場合"""
    level: ScopeLevel

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "this", "level": self.level.value}


@dataclass(frozen=True)
class NextScope:
    """次条や次項などの場合"""
    level: ScopeLevel

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "next", "level": self.level.value}


@dataclass(frozen=True)
class SupplementaryLink:
    """附則の条項"""
    locator: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "suppl_link", "locator": self.locator}


@dataclass(frozen=True)
class PlainLink:
    """通常の条項"""
    locator: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "link", "locator": self.locator}


ScopeReference = Union[ThisScope, NextScope, SupplementaryLink, PlainLink]


# ==============================================================================
# 条件（ScopeNote）
# ==============================================================================

@dataclass(frozen=True)
class SingleNote:
    reference: ScopeReference

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "single", "note": self.reference.to_dict()}


@dataclass(frozen=True)
class RangeNote:
    """start から end まで（両端を含む）"""
    start: ScopeReference
    end: ScopeReference

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "range",
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
        }


ScopeNote = Union[SingleNote, RangeNote]


# ==============================================================================
# パーサ
# ==============================================================================

def parse_scope_reference(segment: str) -> ScopeReference:
    """
    条件文の1要素を参照に変換

    Raises:
        UnrecognizedScopeError: どの形式にも一致しない場合

    Examples:
        >>> parse_scope_reference('この条')
        ThisScope(level=<ScopeLevel.ARTICLE: 'article'>)
        >>> parse_scope_reference('附則第三条')
        SupplementaryLink(locator='第三条')
    """
    # 「この条第二項」「次条第一項」も先頭の単位で判定する
    match = THIS_OR_NEXT_PATTERN.match(segment)
    if match:
        level = LEVEL_KEYWORDS[match.group('level')]
        if match.group('this_or_next') == '次':
            return NextScope(level)
        return ThisScope(level)

    if segment.startswith(SUPPL_PROVISION_PREFIX):
        return SupplementaryLink(segment[len(SUPPL_PROVISION_PREFIX):])

    if LOCATOR_PATTERN.fullmatch(segment):
        return PlainLink(segment)

    raise UnrecognizedScopeError(segment)


def parse_scope_notes(text: str) -> List[ScopeNote]:
    """
    条件文全体をパースして ScopeNote のリストを返す

    Args:
        text: 「において」の直前までの文字列

    Raises:
        UnrecognizedScopeError: 空文字列、または解釈できない要素を含む場合

    Examples:
        >>> parse_scope_notes('第五条から第七条まで')
        [RangeNote(start=PlainLink(locator='第五条'), end=PlainLink(locator='第七条'))]
    """
    segments = [s for s in LIST_DELIMITER_PATTERN.split(text) if s]
    if not segments:
        raise UnrecognizedScopeError(text)

    notes: List[ScopeNote] = []
    for segment in segments:
        range_match = RANGE_PATTERN.fullmatch(segment)
        if range_match:
            notes.append(RangeNote(
                start=parse_scope_reference(range_match.group('start')),
                end=parse_scope_reference(range_match.group('end')),
            ))
        else:
            notes.append(SingleNote(parse_scope_reference(segment)))
    return notes
