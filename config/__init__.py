"""設定管理モジュール.

環境変数からアプリケーション全体で使用する設定を読み込みます。
設定はプロセス起動時に一度だけ読み込み、以降は変更しません。
機密情報（APIkey / password）は値そのものではなく、読み込み状態のみを公開します。"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

# 環境変数が未設定のときに使う番兵値
SENTINEL = "NOT SET"

DEFAULT_PORT = 3000
DEFAULT_APP_ENV = "dev"
DEFAULT_GIT_SHA = "local"

LOADED = "loaded"
MISSING = "missing"


def secret_status(value: str) -> str:
    """機密情報の読み込み状態を返す.

    番兵値との単純な文字列比較で判定します。
    運用者が明示的に "NOT SET" を設定した場合も missing 扱いになります。

    Args:
        value: 機密情報の値

    Returns:
        "loaded" または "missing"
    """
    return LOADED if value != SENTINEL else MISSING


def _parse_port(raw: Optional[str]) -> int:
    """PORTを整数に変換する（数値でなければデフォルト値）."""
    if raw:
        raw = raw.strip()
        # "²" などASCII以外の数字はint()で変換できない
        if raw.isascii() and raw.isdigit():
            return int(raw)
    return DEFAULT_PORT


@dataclass(frozen=True)
class Settings:
    """アプリケーション設定クラス.

    起動時に一度だけ生成し、リクエスト処理側へ明示的に渡します。
    機密情報はreprに含めません。
    """

    port: int = DEFAULT_PORT
    api_key: str = field(default=SENTINEL, repr=False)
    password: str = field(default=SENTINEL, repr=False)
    app_env: str = DEFAULT_APP_ENV
    git_sha: str = DEFAULT_GIT_SHA

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """環境変数から設定を読み込む.

        未設定または空文字の変数はデフォルト値になります。
        """
        if environ is None:
            environ = os.environ

        return cls(
            port=_parse_port(environ.get("PORT")),
            api_key=environ.get("APIkey") or SENTINEL,
            password=environ.get("password") or SENTINEL,
            app_env=environ.get("APP_ENV") or DEFAULT_APP_ENV,
            git_sha=environ.get("GIT_SHA") or DEFAULT_GIT_SHA,
        )

    @property
    def api_key_status(self) -> str:
        return secret_status(self.api_key)

    @property
    def password_status(self) -> str:
        return secret_status(self.password)


def load_settings(dotenv_path: Optional[Union[str, Path]] = None) -> Settings:
    """起動時に設定を読み込む.

    .envファイルがあれば環境変数へ反映してから読み込みます。
    既に設定されている環境変数は上書きしません。
    """
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return Settings.from_env()


__all__ = [
    "SENTINEL",
    "DEFAULT_PORT",
    "DEFAULT_APP_ENV",
    "DEFAULT_GIT_SHA",
    "LOADED",
    "MISSING",
    "Settings",
    "secret_status",
    "load_settings",
]
