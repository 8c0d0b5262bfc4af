"""
法令番号を伴わない略称定義の抽出

「〜。以下この条において「〇〇法」という。」のように、句点で終わる任意の節に
続く略称定義を拾う。法令番号による絞り込みがないため citation より緩い。
条件文はその場で core.scope_note により構造化する。
"""
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .citation import ABBREVIATION_NAME_PATTERN, SCOPE_NOTE_PATTERN
from .scope_note import ScopeNote, parse_scope_notes
from ..utils.span import Span, match_to_span

GENERIC_ABBREVIATION_PATTERN = re.compile(
    r'(?P<clause>[^。）]+)。'
    r'(?:以下)?'
    + SCOPE_NOTE_PATTERN +
    r'、?'
    r'「(?P<name>' + ABBREVIATION_NAME_PATTERN + r')」という。'
)


@dataclass(frozen=True)
class GenericAbbreviation:
    """法令名の略称（条件文は構造化済み）"""
    name: str
    scope_notes: Tuple[ScopeNote, ...]
    # 略称部分の位置
    match_span: Span
    enclosing_article_label: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "scope_notes": [note.to_dict() for note in self.scope_notes],
            "match_span": self.match_span.to_dict(),
            "enclosing_article_label": self.enclosing_article_label,
        }


def extract_generic_abbreviations(
    text: str,
    enclosing_article_label: Optional[str] = None
) -> List[GenericAbbreviation]:
    """
    テキスト断片から略称定義を抽出

    Raises:
        UnrecognizedScopeError: 条件文が解釈できない場合
    """
    records = []
    for match in GENERIC_ABBREVIATION_PATTERN.finditer(text):
        note = match.group('note')
        scope_notes = tuple(parse_scope_notes(note)) if note is not None else ()
        records.append(GenericAbbreviation(
            name=match.group('name'),
            scope_notes=scope_notes,
            match_span=match_to_span(match, 'name'),
            enclosing_article_label=enclosing_article_label,
        ))
    return records
