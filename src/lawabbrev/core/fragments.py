"""
e-Gov 法令XML → 位置イベントとテキスト断片の列

文書順に以下を生成する:
- 位置イベント: ArticleEvent / ParagraphEvent / ItemEvent / SubItemEvent / SupplProvisionEvent
- 断片: TextFragment（文の塊ごと）/ TableFragment（表。中身は辿らない）

位置の管理はここでは行わない。イベントを受け取った Driver が
StructuralPosition を更新する。
"""
import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator, Union

logger = logging.getLogger(__name__)

# 1つの TextFragment にまとめる要素
SENTENCE_CONTAINER_PATTERN = re.compile(r'ParagraphSentence|ItemSentence|Subitem\d+Sentence')

# 号の細分（Subitem1, Subitem2, ...）
SUB_ITEM_PATTERN = re.compile(r'Subitem(\d+)')

# 読み仮名は本文に含めない
SKIP_TEXT_TAGS = ("Rt",)


# =============================================================================
# Events / Fragments
# =============================================================================

@dataclass(frozen=True)
class ArticleEvent:
    num: str


@dataclass(frozen=True)
class ParagraphEvent:
    num: str


@dataclass(frozen=True)
class ItemEvent:
    num: str


@dataclass(frozen=True)
class SubItemEvent:
    depth: int
    num: str


@dataclass(frozen=True)
class SupplProvisionEvent:
    title: str


@dataclass(frozen=True)
class TextFragment:
    content: str


@dataclass(frozen=True)
class TableFragment:
    element: ET.Element


PositionEvent = Union[ArticleEvent, ParagraphEvent, ItemEvent, SubItemEvent, SupplProvisionEvent]
Fragment = Union[TextFragment, TableFragment]
LawEvent = Union[PositionEvent, Fragment]


# =============================================================================
# XML Helpers
# =============================================================================

def get_text(elem: ET.Element) -> str:
    """要素内の全テキストを取得（ルビの読みは除く）"""
    texts = [elem.text or ""]
    for child in elem:
        if child.tag not in SKIP_TEXT_TAGS:
            texts.append(get_text(child))
        texts.append(child.tail or "")
    return "".join(texts)


def parse_law_xml(xml: Union[bytes, str]) -> ET.Element:
    """
    法令XMLをパースして Law 要素を返す

    e-Gov API v1 の DataRoot ラッパー付きでも、Law 要素単体でもよい。

    Raises:
        ET.ParseError: XMLとして不正な場合
        ValueError: Law 要素が見つからない場合
    """
    root = ET.fromstring(xml)
    if root.tag == "Law":
        return root
    law = root.find(".//Law")
    if law is None:
        raise ValueError(f"No Law element found (root: {root.tag})")
    return law


def get_law_num(law: ET.Element) -> str:
    """法令番号（LawNum）を取得。無ければ空文字列"""
    node = law.find("LawNum")
    if node is None:
        node = law.find(".//LawNum")
    return get_text(node).strip() if node is not None else ""


def _suppl_provision_title(suppl: ET.Element) -> str:
    amend_law_num = suppl.get("AmendLawNum")
    if amend_law_num:
        return amend_law_num
    label = suppl.find("SupplProvisionLabel")
    if label is not None:
        return get_text(label).strip()
    return "附則"


# =============================================================================
# Traversal
# =============================================================================

def iter_law_events(elem: ET.Element) -> Iterator[LawEvent]:
    """
    要素を文書順に辿り、位置イベントと断片を生成する
    """
    tag = elem.tag

    if tag == "TableStruct":
        yield TableFragment(elem)
        return

    if SENTENCE_CONTAINER_PATTERN.fullmatch(tag) or tag == "Sentence":
        text = "".join(get_text(s) for s in elem.iter("Sentence"))
        if text:
            yield TextFragment(text)
        return

    if tag == "SupplProvision":
        yield SupplProvisionEvent(_suppl_provision_title(elem))
    elif tag in ("Article", "Paragraph", "Item"):
        num = elem.get("Num")
        if num is None:
            logger.debug(f"{tag} without Num attribute")
        elif tag == "Article":
            yield ArticleEvent(num)
        elif tag == "Paragraph":
            yield ParagraphEvent(num)
        else:
            yield ItemEvent(num)
    else:
        sub_item = SUB_ITEM_PATTERN.fullmatch(tag)
        if sub_item and elem.get("Num") is not None:
            yield SubItemEvent(int(sub_item.group(1)), elem.get("Num"))

    for child in elem:
        yield from iter_law_events(child)
