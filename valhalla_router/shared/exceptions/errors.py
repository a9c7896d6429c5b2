"""カスタム例外定義"""
from typing import Optional


class ValhallaRouterError(Exception):
    """ルーティングクライアント基底例外"""

    pass


class HTTPError(ValhallaRouterError):
    """HTTP関連のエラー"""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        """
        Args:
            message: エラーメッセージ
            status_code: HTTPステータスコード（レスポンスがない場合はNone）
        """
        super().__init__(message)
        self.status_code = status_code


class ParsingError(ValhallaRouterError):
    """レスポンス解析エラー"""

    pass


class ConfigurationError(ValhallaRouterError):
    """設定エラー"""

    pass


class ValidationError(ValhallaRouterError):
    """バリデーションエラー"""

    pass


class MalformedRequestError(ValidationError):
    """リクエスト構築エラー（経由地不足など）"""

    pass
