"""Valhalla /route API へのHTTP送信"""
import json
from dataclasses import dataclass
from typing import Any, Optional

from ....infrastructure.config.settings import Settings
from ....shared.exceptions.errors import ConfigurationError
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RawResponse:
    """未解析のHTTPレスポンス"""

    status_code: int
    body: str


class ValhallaHttpHandler:
    """Valhalla /route エンドポイントへのリクエスト送信"""

    def __init__(
        self,
        endpoint: str,
        api_key: Optional[str] = None,
        http_client: Optional[HTTPClient] = None,
        method: str = "POST",
    ) -> None:
        """
        Args:
            endpoint: サービスのベースURL（例: https://valhalla1.openstreetmap.de）
            api_key: APIキー（api_keyクエリパラメータとして送信）
            http_client: HTTPクライアント（Noneの場合は新規作成）
            method: POST（JSONボディ）または GET（jsonクエリパラメータ）
        """
        if not endpoint:
            raise ConfigurationError("Valhalla endpoint is not set")

        method = method.upper()
        if method not in ("GET", "POST"):
            raise ConfigurationError(f"Unsupported request method: {method}")

        self.endpoint = endpoint.rstrip("/")
        self.api_key = api_key
        self.http_client = http_client or HTTPClient()
        self.method = method

        logger.info(f"ValhallaHttpHandler initialized: endpoint={self.endpoint}, method={method}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ValhallaHttpHandler":
        """設定から生成"""
        http_client = HTTPClient(
            timeout=settings.http_timeout,
            user_agent=settings.http_user_agent,
        )
        return cls(
            endpoint=settings.valhalla_endpoint,
            api_key=settings.valhalla_api_key,
            http_client=http_client,
            method=settings.valhalla_request_method,
        )

    @property
    def route_url(self) -> str:
        return f"{self.endpoint}/route"

    def request_route(self, document: dict[str, Any]) -> RawResponse:
        """
        ルート検索リクエストを1回だけ送信

        2xx以外のステータスも例外にせずそのまま返す

        Args:
            document: リクエストドキュメント

        Returns:
            RawResponse: ステータスコードとボディ

        Raises:
            HTTPError: 接続エラー・タイムアウトなどでレスポンスが得られない場合
        """
        params: dict[str, Any] = {}
        if self.api_key:
            params["api_key"] = self.api_key

        if self.method == "GET":
            params["json"] = json.dumps(document, separators=(",", ":"))
            response = self.http_client.get(
                self.route_url, params=params, raise_for_status=False
            )
        else:
            response = self.http_client.post(
                self.route_url, json=document, params=params or None, raise_for_status=False
            )

        logger.debug(f"Route response received: status={response.status_code}")
        return RawResponse(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        """HTTPセッションをクローズ"""
        self.http_client.close()

    def __enter__(self) -> "ValhallaHttpHandler":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
