"""从 Bag 列表构建包含关系图。"""

from __future__ import annotations

import warnings
from typing import Dict, Sequence, Set

from ..models.bag import Bag
from ..models.graph import ContainedByGraph, ContainsGraph, RuleGraph


def build_contained_by_graph(bags: Sequence[Bag]) -> ContainedByGraph:
    """反向图：颜色 -> 能直接装它的颜色。

    从未作为内容出现的颜色不会有键（而不是空集）。
    """

    graph: Dict[str, Set[str]] = {}
    for bag in bags:
        for content in bag.contents:
            graph.setdefault(content.color, set()).add(bag.color)
    return {color: frozenset(containers) for color, containers in graph.items()}


def build_contains_graph(bags: Sequence[Bag], *, warn: bool = True) -> ContainsGraph:
    """正向图：颜色 -> 它直接装的内容集合。

    同一颜色出现多次时后写覆盖前写；同一条规则里完全相同的
    (count, color) 会被集合合并。两种情况都只发警告，不报错。
    """

    graph: ContainsGraph = {}
    for bag in bags:
        contents = frozenset(bag.contents)
        if warn and bag.color in graph:
            warnings.warn(f"颜色 {bag.color!r} 有多条规则，以最后一条为准", RuntimeWarning)
        if warn and len(contents) != len(bag.contents):
            warnings.warn(f"颜色 {bag.color!r} 的规则里有重复内容，已合并", RuntimeWarning)
        graph[bag.color] = contents
    return graph


def build_rule_graph(bags: Sequence[Bag], *, warn: bool = True) -> RuleGraph:
    return RuleGraph(
        contained_by=build_contained_by_graph(bags),
        contains=build_contains_graph(bags, warn=warn),
    )
