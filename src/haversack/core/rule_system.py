"""规则求解的核心流程入口。"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Set

from ..config import RuleConfig
from ..models.bag import Bag
from ..models.graph import RuleGraph
from .graph_builder import build_rule_graph
from .loader import LineResult, read_lines, to_bags
from .queries import find_bag_count, find_potential_containers


@dataclass(frozen=True)
class RuleSummary:
    """一次求解的两个结果值，不含任何展示格式。"""

    color: str
    potential_container_count: int
    required_bag_count: int


class RuleSystem:
    """读取规则、建图一次，然后反复查询。"""

    def __init__(self, config: RuleConfig | None = None) -> None:
        self.config = config or RuleConfig()
        self._bags: List[Bag] | None = None
        self._graph: RuleGraph | None = None

    def load_lines(self, lines: Iterable[LineResult]) -> "RuleSystem":
        """解析逐行结果并构建两张图；语法错误会原样抛出。"""

        bags = to_bags(
            lines,
            skip_blank=self.config.skip_blank_lines,
            warn_unreadable=self.config.warn_on_unreadable_lines,
        )
        self._graph = build_rule_graph(bags, warn=self.config.warn_on_duplicates)
        self._bags = bags
        return self

    def load_file(self, path: str | Path | None = None) -> "RuleSystem":
        source = path if path is not None else self.config.input_path
        return self.load_lines(read_lines(source, encoding=self.config.encoding))

    @property
    def bags(self) -> List[Bag]:
        if self._bags is None:
            raise RuntimeError("尚未加载规则，请先调用 load_lines 或 load_file。")
        return list(self._bags)

    @property
    def graph(self) -> RuleGraph:
        if self._graph is None:
            raise RuntimeError("尚未加载规则，请先调用 load_lines 或 load_file。")
        return self._graph

    def _target(self, color: str | None) -> str:
        return color if color is not None else self.config.target_color

    def potential_containers(self, color: str | None = None) -> Set[str]:
        return find_potential_containers(self._target(color), self.graph.contained_by)

    def required_bag_count(self, color: str | None = None) -> int:
        return find_bag_count(self._target(color), self.graph.contains)

    def summarize(self, color: str | None = None) -> RuleSummary:
        """计算两个输出值；任一查询失败时异常直接抛出，不返回部分结果。"""

        target = self._target(color)
        containers = self.potential_containers(target)
        return RuleSummary(
            color=target,
            potential_container_count=len(containers),
            required_bag_count=self.required_bag_count(target),
        )
