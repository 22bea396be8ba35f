"""规则解析与查询的异常类型。"""

from __future__ import annotations

from typing import Sequence


class HaversackError(Exception):
    """本包所有异常的基类。"""


class RuleSyntaxError(HaversackError, ValueError):
    """一行规则不符合 "<color> bags contain <contents>." 语法。"""

    def __init__(self, line: str, reason: str, line_number: int | None = None) -> None:
        self.line = line
        self.reason = reason
        self.line_number = line_number
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = f"第 {self.line_number} 行" if self.line_number is not None else "规则"
        return f"{where}无法解析（{self.reason}）：{self.line!r}"

    def at_line(self, line_number: int) -> "RuleSyntaxError":
        """补上行号后返回自身，便于批量解析时定位。"""

        self.line_number = line_number
        self.args = (self._describe(),)
        return self


class MalformedCountError(RuleSyntaxError):
    """数量不是合法的无符号 64 位整数。"""


class UnknownColorError(HaversackError, KeyError):
    """包含图中缺少某个颜色，规则集不完整。"""

    def __init__(self, color: str) -> None:
        self.color = color
        super().__init__(color)

    def __str__(self) -> str:
        return f"包含图中没有颜色 {self.color!r}，规则集不完整"


class ContainmentCycleError(HaversackError, ValueError):
    """包含关系出现环：某个袋子直接或间接地装着自己。"""

    def __init__(self, path: Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__("包含关系出现环：" + " -> ".join(self.path))
