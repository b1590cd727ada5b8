"""サービスパッケージ.

ルーティング判定・レスポンス生成と起動バナー出力を提供します。"""

from .responder import Route, resolve_route, respond
from .startup_reporter import StartupReporter

__all__ = ["Route", "resolve_route", "respond", "StartupReporter"]
