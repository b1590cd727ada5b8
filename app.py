import logging
import os
from typing import Optional

from flask import Flask, Response
from werkzeug.exceptions import MethodNotAllowed, NotFound
from werkzeug.serving import make_server

from config import Settings, load_settings
from routes import json_response, raw_path, status_bp
from services.startup_reporter import StartupReporter

# --- ロギング設定 ---
def resolve_log_level(name: Optional[str]) -> int:
    """LOG_LEVELの値をログレベルに変換する（不明な値はINFO）."""
    level = logging.getLevelName((name or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    level=resolve_log_level(os.environ.get("LOG_LEVEL")),
    format="%(asctime)s %(levelname)s: %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Flaskアプリケーションを作成する.

    Args:
        settings: 起動時に読み込んだ設定。省略時は環境変数から読み込む

    Returns:
        Flaskアプリケーション
    """
    if settings is None:
        settings = Settings.from_env()

    app = Flask(__name__, static_folder=None)
    app.config["APP_SETTINGS"] = settings
    # //health などをリダイレクトせず、そのままフォールバックさせる
    app.url_map.merge_slashes = False

    app.register_blueprint(status_bp)

    # 未知のメソッドやルールに一致しないパス（//health など）も200で応答する
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def handle_routing_error(error: Exception) -> Response:
        return json_response(raw_path())

    return app


def serve(
    settings: Settings,
    app: Optional[Flask] = None,
    reporter: Optional[StartupReporter] = None,
    host: str = DEFAULT_HOST,
) -> None:
    """サーバーを起動する.

    バインドに成功した後で起動バナーを出力します。
    バインドに失敗した場合はwerkzeugの既定動作（標準エラーへ出力して終了）のままです。
    """
    if app is None:
        app = create_app(settings)
    if reporter is None:
        reporter = StartupReporter()

    server = make_server(host, settings.port, app, threaded=True)
    reporter.report(settings)
    server.serve_forever()


def main() -> None:
    settings = load_settings()
    logger.info(f"Starting Test Workflow App (env={settings.app_env}, gitSha={settings.git_sha})...")
    serve(settings)


if __name__ == '__main__':
    main()
