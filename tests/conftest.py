"""pytest設定ファイル
プロジェクト全体のテストで共通利用するフィクスチャを定義します。
"""

import pytest

from config import Settings

TEST_API_KEY = "sk-test-7f3a9c"
TEST_PASSWORD = "hunter2-test"


@pytest.fixture
def settings():
    """デフォルト値のみの設定（環境変数なし相当）."""
    return Settings.from_env({})


@pytest.fixture
def loaded_settings():
    """機密情報が読み込まれた設定."""
    return Settings.from_env({
        "PORT": "8080",
        "APIkey": TEST_API_KEY,
        "password": TEST_PASSWORD,
        "APP_ENV": "staging",
        "GIT_SHA": "abc123",
    })


@pytest.fixture
def app(settings):
    """テスト用Flaskアプリケーションインスタンスを作成."""
    from app import create_app
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """テストクライアントインスタンスを作成."""
    return app.test_client()


@pytest.fixture
def loaded_client(loaded_settings):
    from app import create_app
    app = create_app(loaded_settings)
    app.config["TESTING"] = True
    return app.test_client()
