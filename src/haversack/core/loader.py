"""批量读取与解析规则。"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from ..errors import RuleSyntaxError
from ..models.bag import Bag
from .parser import parse_rule

# 逐行读取的结果：成功时是文本，失败时是对应的异常对象
LineResult = Union[str, Exception]


def read_lines(path: str | Path, encoding: str = "utf-8") -> Iterator[LineResult]:
    """逐行读取文件。

    每行单独解码：某一行解码失败时产出该异常对象而不是中断，
    由 to_bags 决定跳过。文件本身打不开仍直接抛出。
    """

    with Path(path).open("rb") as handle:
        for raw in handle:
            try:
                text = raw.decode(encoding)
            except UnicodeDecodeError as exc:
                yield exc
                continue
            yield text.rstrip("\r\n")


def to_bags(
    lines: Iterable[LineResult],
    *,
    skip_blank: bool = False,
    warn_unreadable: bool = False,
) -> List[Bag]:
    """把逐行结果转换为 Bag 列表。

    读取失败的行直接跳过；读取成功但语法错误的行会中断整批解析，
    异常上带着出错的行号。
    """

    bags: List[Bag] = []
    for line_number, line in enumerate(lines, start=1):
        if isinstance(line, Exception):
            if warn_unreadable:
                warnings.warn(f"第 {line_number} 行读取失败，已跳过：{line}", RuntimeWarning)
            continue
        if skip_blank and not line.strip():
            continue
        try:
            bags.append(parse_rule(line))
        except RuleSyntaxError as exc:
            raise exc.at_line(line_number)
    return bags
