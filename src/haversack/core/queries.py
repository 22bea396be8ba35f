"""两种图查询：可能的外层容器，以及需要装入的袋子总数。"""

from __future__ import annotations

from typing import Collection, Dict, Iterator, List, Mapping, Set, Tuple

from ..errors import ContainmentCycleError, UnknownColorError
from ..models.bag import Content


def find_potential_containers(target: str, graph: Mapping[str, Collection[str]]) -> Set[str]:
    """反向图上的祖先闭包：所有能直接或间接装下 target 的颜色。

    使用显式栈与已访问集合，输入里即使有环也能结束；
    target 本身永远不在结果里。查不到的颜色视为没有容器。
    """

    containers: Set[str] = set()
    stack = [target]
    while stack:
        color = stack.pop()
        for container in graph.get(color, ()):
            if container == target or container in containers:
                continue
            containers.add(container)
            stack.append(container)
    return containers


def find_bag_count(target: str, graph: Mapping[str, Collection[Content]]) -> int:
    """加权下降：装满一个 target 需要的袋子总数（不含 target 本身）。"""

    # 减 1：最外层的袋子不算
    return _count_with_self(target, graph) - 1


def _count_with_self(target: str, graph: Mapping[str, Collection[Content]]) -> int:
    """后序遍历并记忆化：total(c) = 1 + sum(count * total(child))。

    路径上的颜色再次出现即为环，抛出 ContainmentCycleError；
    遇到图里没有的颜色抛出 UnknownColorError。
    """

    totals: Dict[str, int] = {}
    on_path: Set[str] = set()
    stack: List[Tuple[str, Iterator[Content]]] = []

    def enter(color: str) -> None:
        if color not in graph:
            raise UnknownColorError(color)
        on_path.add(color)
        stack.append((color, iter(graph[color])))

    enter(target)
    while stack:
        color, pending = stack[-1]
        for content in pending:
            if content.color in totals:
                continue
            if content.color in on_path:
                path = [frame[0] for frame in stack]
                raise ContainmentCycleError(path[path.index(content.color):] + [content.color])
            enter(content.color)
            break
        else:
            stack.pop()
            on_path.discard(color)
            totals[color] = 1 + sum(content.count * totals[content.color] for content in graph[color])
    return totals[target]
