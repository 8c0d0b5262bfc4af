"""
条文中の構造上の位置（条・項・号・号の細分・附則）

StructuralPosition は不変値。各 set_* は新しい位置を返し、
所有者（Driver）がそれを代入し直す。パースに失敗した場合は例外を送出し、
元の位置はそのまま残る。

カスケード:
- 条を設定すると 項・号・号の細分 がクリアされる
- 項を設定すると 号・号の細分 がクリアされる
- 号を設定すると 号の細分 がクリアされる
- 附則タイトルを設定すると位置全体が初期化される（附則は番号が振り直される）
"""
import re
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from .errors import MalformedNumberError

NUM_COMPONENT_PATTERN = re.compile(r'[0-9]+')


def parse_num(raw: str) -> Tuple[int, ...]:
    """
    `_` 区切りの番号文字列をパース（枝番対応）

    Examples:
        >>> parse_num('3')
        (3,)
        >>> parse_num('3_2')
        (3, 2)
    """
    if not isinstance(raw, str):
        raise MalformedNumberError(repr(raw))
    parts = raw.split('_')
    if not all(NUM_COMPONENT_PATTERN.fullmatch(p) for p in parts):
        raise MalformedNumberError(raw)
    return tuple(int(p) for p in parts)


@dataclass(frozen=True)
class StructuralPosition:
    # 条
    article: Tuple[int, ...] = ()
    # 項
    paragraph: Tuple[int, ...] = ()
    # 号
    item: Tuple[int, ...] = ()
    # イロハなどの号の細分（深さ, 番号）
    sub_item: Optional[Tuple[int, Tuple[int, ...]]] = None
    # 附則の場合のみ
    suppl_provision_title: Optional[str] = None

    def set_article(self, raw: str) -> "StructuralPosition":
        return replace(self, article=parse_num(raw), paragraph=(), item=(), sub_item=None)

    def set_paragraph(self, raw: str) -> "StructuralPosition":
        return replace(self, paragraph=parse_num(raw), item=(), sub_item=None)

    def set_item(self, raw: str) -> "StructuralPosition":
        return replace(self, item=parse_num(raw), sub_item=None)

    def set_sub_item(self, depth: int, raw: str) -> "StructuralPosition":
        if depth < 0:
            raise MalformedNumberError(str(depth))
        return replace(self, sub_item=(depth, parse_num(raw)))

    def set_suppl_provision_title(self, title: str) -> "StructuralPosition":
        return StructuralPosition(suppl_provision_title=title)

    @property
    def is_suppl_provision(self) -> bool:
        return self.suppl_provision_title is not None

    def article_label(self) -> Optional[str]:
        """
        条の日本語表記を返す

        Examples:
            >>> StructuralPosition(article=(3, 2)).article_label()
            '第3条の2'
            >>> StructuralPosition(article=(1,), suppl_provision_title='附則').article_label()
            '附則第1条'
        """
        prefix = '附則' if self.is_suppl_provision else ''
        if not self.article:
            return prefix or None
        main, *branches = self.article
        label = f"第{main}条" + ''.join(f"の{b}" for b in branches)
        return prefix + label

    def to_dict(self) -> Dict[str, Any]:
        """JSON 出力用。空の項目は省略する（条のみ常に出力）"""
        data: Dict[str, Any] = {"article": list(self.article)}
        if self.paragraph:
            data["paragraph"] = list(self.paragraph)
        if self.item:
            data["item"] = list(self.item)
        if self.sub_item is not None:
            depth, num = self.sub_item
            data["sub_item"] = [depth, list(num)]
        if self.suppl_provision_title is not None:
            data["suppl_provision_title"] = self.suppl_provision_title
        return data
