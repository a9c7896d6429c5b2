"""アプリケーション設定（Pydantic Settings）"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Valhalla
    valhalla_endpoint: str = Field(
        default="https://valhalla1.openstreetmap.de",
        description="ValhallaサービスのベースURL",
    )
    valhalla_api_key: Optional[str] = Field(
        default=None,
        description="APIキー（api_keyクエリパラメータとして送信）",
    )
    valhalla_request_method: str = Field(
        default="POST",
        description="リクエストメソッド (POST: JSONボディ, GET: jsonクエリパラメータ)",
    )

    # HTTP
    http_timeout: int = Field(
        default=20,
        description="HTTPリクエストのタイムアウト（秒）",
    )
    http_user_agent: Optional[str] = Field(
        default=None,
        description="User-Agentヘッダー（未指定時はクライアントのデフォルト）",
    )

    # Routing defaults
    default_language: str = Field(
        default="en-US",
        description="ロケールから言語を決定できない場合の案内言語",
    )
    default_units: str = Field(
        default="kilometers",
        description="距離単位 (kilometers, miles)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
