"""共通フィクスチャ"""
from pathlib import Path
from unittest.mock import Mock

import pytest

from valhalla_router.features.routing.providers.valhalla_http_handler import RawResponse

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """tests/fixtures/<name>.json の内容を取得"""
    return (FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8")


@pytest.fixture
def brooklyn_json() -> str:
    return load_fixture("brooklyn_valhalla")


@pytest.fixture
def make_handler():
    """指定したレスポンスを返すHTTPハンドラーのモックを生成"""

    def _make(status_code: int = 200, body: str = "") -> Mock:
        handler = Mock()
        handler.request_route.return_value = RawResponse(status_code=status_code, body=body)
        return handler

    return _make


@pytest.fixture
def fixture_json():
    """フィクスチャ名からJSON文字列を取得する関数"""
    return load_fixture
