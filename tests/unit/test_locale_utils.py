"""ロケールユーティリティのテスト"""
from typing import Optional

import pytest

from valhalla_router.features.routing.domain.enums import Language
from valhalla_router.shared.utils.locale_utils import resolve_language


@pytest.mark.parametrize(
    "locale_tag,expected",
    [
        ("en_US.UTF-8", "en-US"),
        ("de_DE", "de-DE"),
        ("en_GB.UTF-8", "en"),
        ("ja_JP", "ja"),
        ("fr", "fr"),
        ("", "en-US"),
    ],
)
def test_resolve_language(locale_tag: Optional[str], expected: str) -> None:
    assert resolve_language("en-US", Language.is_supported, locale_tag) == expected


def test_resolve_language_without_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "valhalla_router.shared.utils.locale_utils.current_locale", lambda: None
    )
    assert resolve_language("sv-SE", Language.is_supported) == "sv-SE"
