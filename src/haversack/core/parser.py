"""单行规则解析。

语法：``<color> bags contain <contents>.``，其中 contents 是 ``no other bags``
或逗号分隔的 ``<count> <color> bag(s)``。这里用固定分隔符切分，不依赖正则。
"""

from __future__ import annotations

from typing import List

from ..errors import MalformedCountError, RuleSyntaxError
from ..models.bag import Bag, Content

RULE_SEPARATOR = " bags contain "
BAG_WORDS = ("bag", "bags")
# 数量按无符号 64 位整数解析
MAX_COUNT = 2**64 - 1


def _is_word(token: str) -> bool:
    """单个颜色词：字母、数字或下划线。"""

    return bool(token) and all(ch.isalnum() or ch == "_" for ch in token)


def _split_words(text: str) -> List[str] | None:
    """按空白切词，词与词之间必须恰好隔一个空白字符，首尾不能有空白。"""

    words = text.split()
    if not words or len(text) != sum(len(word) for word in words) + len(words) - 1:
        return None
    if not all(_is_word(word) for word in words):
        return None
    return words


def parse_content(clause: str) -> Content | None:
    """解析一个内容子句，例如 ``" 3 light yellow bags."``。

    不符合子句语法的片段（尤其是 "no other bags"）返回 None，由调用方丢弃。
    数量是一串数字但超出范围时，视为致命错误。
    """

    # 允许一个前导空白、结尾空白（含换行）与一个结尾句点
    if clause[:1].isspace():
        clause = clause[1:]
    clause = clause.rstrip()
    if clause.endswith("."):
        clause = clause[:-1]
    words = _split_words(clause)
    if words is None or len(words) < 3 or words[-1] not in BAG_WORDS:
        return None
    count_token = words[0]
    if not (count_token.isascii() and count_token.isdigit()):
        return None
    # 颜色保留原文，不做空白规范化
    color = clause[len(count_token) + 1 : len(clause) - len(words[-1]) - 1]
    count = int(count_token)
    if count > MAX_COUNT:
        raise MalformedCountError(clause, f"数量 {count_token} 超出范围")
    return Content(count=count, color=color)


def parse_rule(line: str) -> Bag:
    """把一行规则解析为 Bag。

    颜色取到最后一个 " bags contain " 为止；外层语法不匹配时抛出 RuleSyntaxError。
    内容子句逐个解析，不匹配的子句直接丢弃，"no other bags" 就是这样变成空内容的。
    """

    color, separator, contents = line.rpartition(RULE_SEPARATOR)
    if not separator:
        raise RuleSyntaxError(line, f"缺少 {RULE_SEPARATOR.strip()!r}")
    if _split_words(color) is None:
        raise RuleSyntaxError(line, f"颜色不合法：{color!r}")
    if not contents:
        raise RuleSyntaxError(line, "缺少内容描述")

    parsed: List[Content] = []
    for clause in contents.split(","):
        try:
            content = parse_content(clause)
        except MalformedCountError as exc:
            raise MalformedCountError(line, exc.reason) from exc
        if content is not None:
            parsed.append(content)
    return Bag(color=color, contents=tuple(parsed))
