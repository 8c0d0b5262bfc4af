"""
法令1本分のイベント列を処理して略称定義を集める Driver

- StructuralPosition を唯一所有し、位置イベントの順に更新する
- 表（TableFragment）は抽出器に渡さない（表中で略称が定義されることは無い）
- 断片単位のパース失敗は記録して次の断片へ進む（それまでの位置は維持）
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from .citation import CitationAbbreviation, extract_citation_abbreviations
from .errors import LawAbbrevError
from .fragments import (
    ArticleEvent,
    ItemEvent,
    LawEvent,
    ParagraphEvent,
    SubItemEvent,
    SupplProvisionEvent,
    TableFragment,
    TextFragment,
    get_law_num,
    iter_law_events,
    parse_law_xml,
)
from .generic import GenericAbbreviation, extract_generic_abbreviations
from .position import StructuralPosition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionError:
    """手動確認用のエラー記録"""
    law_num: str
    position: StructuralPosition
    text: str
    error: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "law_num": self.law_num,
            "position": self.position.to_dict(),
            "text": self.text,
            "error": self.error,
        }


@dataclass
class CollectionResult:
    law_num: str = ""
    citations: List[CitationAbbreviation] = field(default_factory=list)
    abbreviations: List[GenericAbbreviation] = field(default_factory=list)
    errors: List[ExtractionError] = field(default_factory=list)

    def records(self) -> List[Union[CitationAbbreviation, GenericAbbreviation]]:
        return [*self.citations, *self.abbreviations]


class AbbreviationCollector:
    def __init__(self, law_num: str, generic: bool = False):
        self.law_num = law_num
        self.generic = generic
        self.position = StructuralPosition()

    def collect(self, events: Iterable[LawEvent]) -> CollectionResult:
        """イベント列を文書順に処理する"""
        result = CollectionResult(law_num=self.law_num)
        for event in events:
            if isinstance(event, TableFragment):
                continue
            if isinstance(event, TextFragment):
                self._extract(event.content, result)
            else:
                self._move(event, result)
        logger.info(
            f"{self.law_num or '(no law num)'}: "
            f"{len(result.citations)} citation(s), "
            f"{len(result.abbreviations)} abbreviation(s), "
            f"{len(result.errors)} error(s)"
        )
        return result

    def _move(self, event: LawEvent, result: CollectionResult):
        """位置イベントを適用（失敗時は直前の位置を維持）"""
        try:
            if isinstance(event, ArticleEvent):
                self.position = self.position.set_article(event.num)
            elif isinstance(event, ParagraphEvent):
                self.position = self.position.set_paragraph(event.num)
            elif isinstance(event, ItemEvent):
                self.position = self.position.set_item(event.num)
            elif isinstance(event, SubItemEvent):
                self.position = self.position.set_sub_item(event.depth, event.num)
            elif isinstance(event, SupplProvisionEvent):
                self.position = self.position.set_suppl_provision_title(event.title)
            else:
                raise TypeError(f"Unknown event: {event!r}")
        except LawAbbrevError as e:
            logger.warning(f"{self.law_num}: {e} at {self.position.to_dict()}")
            result.errors.append(ExtractionError(self.law_num, self.position, "", str(e)))

    def _extract(self, text: str, result: CollectionResult):
        result.citations.extend(
            extract_citation_abbreviations(self.law_num, self.position, text)
        )
        if not self.generic:
            return
        try:
            result.abbreviations.extend(
                extract_generic_abbreviations(text, self.position.article_label())
            )
        except LawAbbrevError as e:
            logger.warning(f"{self.law_num}: {e} at {self.position.to_dict()}")
            result.errors.append(ExtractionError(self.law_num, self.position, text, str(e)))


def collect_law_abbreviations(
    xml: Union[bytes, str],
    law_num: Optional[str] = None,
    generic: bool = False
) -> CollectionResult:
    """
    法令XMLから略称定義を抽出

    Args:
        xml: e-Gov 法令XML
        law_num: 法令番号（省略時は XML の LawNum を使用）
        generic: 法令番号を伴わない略称定義も抽出する
    """
    law = parse_law_xml(xml)
    if law_num is None:
        law_num = get_law_num(law)
    collector = AbbreviationCollector(law_num, generic=generic)
    return collector.collect(iter_law_events(law))
