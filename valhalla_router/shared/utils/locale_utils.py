"""ロケール関連ユーティリティ"""

import locale
from collections.abc import Callable
from typing import Optional


def current_locale() -> Optional[str]:
    """
    プロセスのロケールを "ll_CC" 形式で取得

    Returns:
        Optional[str]: ロケール文字列（取得できない場合はNone）
    """
    tag, _encoding = locale.getlocale()
    if not tag or tag in ("C", "POSIX"):
        return None
    return tag


def resolve_language(
    default: str,
    supported: Callable[[str], bool],
    locale_tag: Optional[str] = None,
) -> str:
    """
    ロケールから案内言語を決定

    - "ll-CC" がサポート対象ならそのまま使用
    - それ以外は言語コード "ll" のみを使用
    - ロケールが取得できない場合はデフォルト

    Args:
        default: フォールバック言語
        supported: 言語タグのサポート判定関数
        locale_tag: 判定対象のロケール（Noneの場合はプロセスのロケール）

    Returns:
        str: 言語タグ
    """
    tag = locale_tag if locale_tag is not None else current_locale()
    if not tag:
        return default

    # "en_US.UTF-8" -> ("en", "US")
    tag = tag.split(".")[0].replace("_", "-")
    parts = tag.split("-")
    language = parts[0].lower()
    if not language:
        return default

    if len(parts) > 1:
        candidate = f"{language}-{parts[1].upper()}"
        if supported(candidate):
            return candidate

    return language
