"""
异常定义

仓库访问失败与空仓库是需要调用方处理的错误；
不合法的标签名和没有意图符号的提交不是错误，会被静默忽略。
"""


class ReleaseCheckerError(Exception):
    """错误基类"""
    pass


class RepositoryError(ReleaseCheckerError):
    """仓库访问失败（存储损坏、无法读取引用等）"""
    pass


class RepositoryNotFoundError(RepositoryError):
    """路径不存在或不是 git 仓库"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Not a git repository: {path}")


class NoCommitsError(RepositoryError):
    """仓库中没有任何提交（HEAD 无法解析）"""

    def __init__(self, message: str = "Repository has no commits"):
        super().__init__(message)


class MissingIntentionError(ReleaseCheckerError):
    """提交信息中没有任何可识别的意图符号"""
    pass
