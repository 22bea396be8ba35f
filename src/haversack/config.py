"""全局配置与默认参数。"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class RuleConfig:
    """规则求解的可调参数集合。

    注意：查询函数本身不读取这里的目标颜色，只有 RuleSystem 用它作默认值。
    """

    # 默认查询目标
    target_color: str = "shiny gold"
    # 默认规则文件路径（data/input.txt）
    input_path: str = field(
        default_factory=lambda: str(Path(__file__).resolve().parents[2] / "data" / "input.txt")
    )
    # 逐行解码所用编码
    encoding: str = "utf-8"
    # 读取文件时忽略空行（例如文件末尾多出的空行）
    skip_blank_lines: bool = True
    # 读取失败被跳过的行是否发出警告（默认静默跳过）
    warn_on_unreadable_lines: bool = False
    # 重复颜色 / 重复内容时是否发出警告
    warn_on_duplicates: bool = True
