"""ステータスルート.

全パス・全メソッドを1つのビューで受け、レスポンス生成はresponderに任せます。"""

from http import HTTPStatus

from flask import Blueprint, Response, current_app, request

from services.responder import resolve_route, render

status_bp = Blueprint("status", __name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def raw_path() -> str:
    """クエリ文字列を除いた、正規化前のリクエストパスを返す.

    request.path も開発サーバーのPATH_INFOも先頭の連続スラッシュを
    まとめてしまうため、リクエスト行のURI（RAW_URI / REQUEST_URI）を優先する。
    どちらもないサーバーではPATH_INFOを使う。
    """
    environ = request.environ
    uri = environ.get("RAW_URI") or environ.get("REQUEST_URI")
    if uri:
        return uri.split("?", 1)[0]
    return environ.get("PATH_INFO", "")


def json_response(path: str) -> Response:
    """パスに対応するJSONレスポンスを返す（常に200）."""
    route = resolve_route(path)
    current_app.logger.debug(f"{request.method} {path} -> {route.name}")
    body = render(route, current_app.config["APP_SETTINGS"])
    return Response(body, status=HTTPStatus.OK, mimetype="application/json")


@status_bp.route("/", defaults={"path": ""}, methods=ALL_METHODS, provide_automatic_options=False)
@status_bp.route("/<path:path>", methods=ALL_METHODS, provide_automatic_options=False)
def status(path: str) -> Response:
    # メソッドとリクエストボディは見ない
    return json_response(raw_path())
