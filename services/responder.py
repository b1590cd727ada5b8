"""リクエストパスに応じたJSONレスポンスを組み立てるモジュール.

パスは完全一致で判定し、/health と /secrets 以外はすべて
アプリ情報レスポンスにフォールバックします（404は返しません）。"""

import json
from enum import Enum
from typing import Any

from config import Settings

APP_NAME = "Test Workflow App"
SECRETS_MESSAGE = "Secrets loaded from Infisical via fetch-infisical-env.sh"

HEALTH_PATH = "/health"
SECRETS_PATH = "/secrets"
ROUTE_PATHS = (HEALTH_PATH, SECRETS_PATH)


class Route(Enum):
    HEALTH = "health"
    SECRETS = "secrets"
    OTHER = "other"


def resolve_route(path: str) -> Route:
    """パスからルートを判定する.

    Args:
        path: クエリ文字列を含まないリクエストパス

    Returns:
        一致したルート。どれにも一致しなければ Route.OTHER
    """
    if path == HEALTH_PATH:
        return Route.HEALTH
    if path == SECRETS_PATH:
        return Route.SECRETS
    return Route.OTHER


def build_payload(route: Route, settings: Settings) -> dict[str, Any]:
    """ルートに対応するレスポンス本体を作成する."""
    if route is Route.HEALTH:
        return {"status": "ok"}

    if route is Route.SECRETS:
        # 値そのものは返さず、読み込み状態のみ
        return {
            "message": SECRETS_MESSAGE,
            "env": settings.app_env,
            "keys": {
                "apiKey": settings.api_key_status,
                "password": settings.password_status,
            },
        }

    return {
        "app": APP_NAME,
        "env": settings.app_env,
        "gitSha": settings.git_sha,
        "routes": list(ROUTE_PATHS),
    }


def render(route: Route, settings: Settings) -> str:
    """レスポンス本体をJSON文字列にする.

    /health はコンパクト形式、それ以外はインデント2で整形します。
    """
    payload = build_payload(route, settings)
    if route is Route.HEALTH:
        return json.dumps(payload, separators=(",", ":"))
    return json.dumps(payload, indent=2, ensure_ascii=False)


def respond(path: str, settings: Settings) -> str:
    return render(resolve_route(path), settings)
