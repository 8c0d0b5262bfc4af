"""
法令番号付きの略称定義の抽出

例:
    地方税法等の一部を改正する等の法律（平成二十八年法律第十三号。
    以下イにおいて「平成二十八年地方税法等改正法」という。）

→ CitationAbbreviation(
      citation_number='平成二十八年法律第十三号',
      abbreviation_name='平成二十八年地方税法等改正法',
      scope_note_text='イ', ...)

条件文（scope_note_text）は未解析のまま保持する。解析が必要かどうかは
呼び出し側が決める（core.scope_note.parse_scope_notes を使う）。
"""
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .position import StructuralPosition
from ..utils.law_num import normalize_law_num

logger = logging.getLogger(__name__)

# 法令番号: 元号 + 漢数字の年 + 種別（括弧・句読点・ひらがなを含まない）+ 第N号
# 種別部分からひらがなと括弧を除外し、前方の別の法令番号が後続の文を取り込まないようにする
CITATION_NUMBER_PATTERN = (
    r'(?:明治|大正|昭和|平成|令和)[元〇一二三四五六七八九十]+年'
    r'[^（）、。あ-ん]+'
    r'第[〇一二三四五六七八九十百千]+号'
)

# 略称として認識するのは「〜法」「〜令」で終わるもののみ
ABBREVIATION_NAME_PATTERN = r'[^」]*(?:法|令)'

# 「において」の前の条件文（句点と鉤括弧を含まない）
SCOPE_NOTE_PATTERN = r'(?:(?P<note>[^「」）。]+)において)?'

CITATION_ABBREVIATION_PATTERN = re.compile(
    r'（(?P<num>' + CITATION_NUMBER_PATTERN + r')'
    r'[^（）]*?'
    r'(?:以下)?'
    + SCOPE_NOTE_PATTERN +
    r'、?'
    r'「(?P<name>' + ABBREVIATION_NAME_PATTERN + r')」という。'
)


@dataclass(frozen=True)
class CitationAbbreviation:
    """法令名の略称（法令番号付き）"""
    # 法令番号
    citation_number: str
    # 法令の略称
    abbreviation_name: str
    # 「本項において」などの条件文
    scope_note_text: Optional[str]
    # 記述されている位置
    position: StructuralPosition
    # 略称が定義されている法令の法令番号
    source_law_number: str

    @property
    def normalized_citation_number(self) -> str:
        return normalize_law_num(self.citation_number)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "citation_number": self.citation_number,
            "normalized_citation_number": self.normalized_citation_number,
            "abbreviation_name": self.abbreviation_name,
        }
        if self.scope_note_text is not None:
            data["scope_note_text"] = self.scope_note_text
        data["position"] = self.position.to_dict()
        data["source_law_number"] = self.source_law_number
        return data


def extract_citation_abbreviations(
    law_num: str,
    position: StructuralPosition,
    text: str
) -> List[CitationAbbreviation]:
    """
    テキスト断片から法令番号付きの略称定義を抽出

    Args:
        law_num: 抽出元の法令の法令番号
        position: 断片の位置（そのまま各レコードに記録される）
        text: 本文の断片

    Returns:
        本文中の出現順のレコードのリスト（該当なしは空リスト）
    """
    records = []
    for match in CITATION_ABBREVIATION_PATTERN.finditer(text):
        num = match.group('num')
        name = match.group('name')
        if num is None or name is None:
            continue
        records.append(CitationAbbreviation(
            citation_number=num,
            abbreviation_name=name,
            scope_note_text=match.group('note'),
            position=position,
            source_law_number=law_num,
        ))
    if records:
        logger.debug(f"{len(records)} citation abbreviation(s) at {position.to_dict()}")
    return records
