"""起動バナー出力.

ソケットのバインド成功後に、ポート・環境・機密情報の読み込み状態を
標準出力へ書き出します。テストでは出力先を差し替えられます。"""

import sys
from typing import Optional, TextIO

from config import Settings

DIVIDER = "─" * 40


def format_banner(settings: Settings) -> list[str]:
    """起動バナーの各行を作成する."""
    return [
        DIVIDER,
        f"  Server running on port {settings.port}",
        f"  ENV        : {settings.app_env}",
        f"  APIkey     : {settings.api_key_status}",
        f"  password   : {settings.password_status}",
        DIVIDER,
    ]


class StartupReporter:
    def __init__(self, stream: Optional[TextIO] = None):
        # Noneの場合は出力時点のsys.stdoutを使う
        self.stream = stream

    def report(self, settings: Settings) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        for line in format_banner(settings):
            stream.write(line + "\n")
        stream.flush()
