"""
配置定义
"""

from dataclasses import dataclass
from pathlib import Path


# 支持的输出格式
OUTPUT_FORMATS = ("rich", "json")

# 通过环境变量覆盖输出格式
FORMAT_ENV_VAR = "RELEASE_CHECKER_FORMAT"


@dataclass
class CheckerConfig:
    """
    检查配置

    Attributes:
        path: 仓库路径（或其子目录）
        output_format: 输出格式，rich 或 json
        verbose: 是否输出调试日志
        search_parent_directories: 是否向上查找 .git 目录
    """
    path: Path = Path(".")
    output_format: str = "rich"
    verbose: bool = False
    search_parent_directories: bool = True

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.output_format = self.output_format.lower()
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output format: {self.output_format} "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )
