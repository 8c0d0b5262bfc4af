"""
文字列上の位置情報（半開区間）
"""
import re
from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class Span:
    """元の文字列に対する半開区間 [start, end)"""
    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span: start={self.start}, end={self.end}")

    def to_dict(self) -> Dict[str, int]:
        return {"start": self.start, "end": self.end}


def match_to_span(match: "re.Match[str]", group: Union[int, str] = 0) -> Span:
    """
    正規表現のマッチ（またはそのグループ）から Span を生成

    Examples:
        >>> m = re.search(r'「(?P<name>[^」]*)」', 'ああ「民法」')
        >>> match_to_span(m, 'name')
        Span(start=3, end=5)
    """
    return Span(start=match.start(group), end=match.end(group))
