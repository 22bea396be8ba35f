"""袋子规则模型。"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Content:
    """直接装入的一种袋子：数量 + 颜色。

    frozen 使其可哈希，包含图用集合保存它，完全相同的 (count, color) 会合并。
    """

    count: int
    color: str


@dataclass(frozen=True)
class Bag:
    """一条规则：颜色及其直接内容（可为空，即 "no other bags"）。"""

    color: str
    contents: Tuple[Content, ...] = ()
