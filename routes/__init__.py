"""ルーティングパッケージ.

ブループリントをまとめ、外部から利用しやすくします。"""

from .status import json_response, raw_path, status_bp

__all__ = ["json_response", "raw_path", "status_bp"]
