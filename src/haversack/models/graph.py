"""由规则集派生的两张图。"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet

from .bag import Content

# 颜色 -> 能直接装它的颜色集合（反向边）
ContainedByGraph = Dict[str, FrozenSet[str]]
# 颜色 -> 它直接装的内容集合（正向边）
ContainsGraph = Dict[str, FrozenSet[Content]]


@dataclass(frozen=True)
class RuleGraph:
    """同一规则集上的两张图，构建后只读。"""

    contained_by: ContainedByGraph = field(default_factory=dict)
    contains: ContainsGraph = field(default_factory=dict)

