"""HTTPクライアント"""

from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..exceptions.errors import HTTPError
from ..logging.config import get_logger

logger = get_logger(__name__)

DEFAULT_USER_AGENT = "valhalla-router/1.0 (+python-requests)"


class HTTPClient:
    """
    セッション管理付きHTTPクライアント

    Features:
    - タイムアウト設定
    - セッション管理
    - リトライなし（1リクエスト1回のみ送信）
    """

    def __init__(
        self,
        timeout: int = 20,
        user_agent: Optional[str] = None,
    ):
        """
        Args:
            timeout: リクエストタイムアウト（秒）
            user_agent: User-Agentヘッダー
        """
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT

        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """セッションを作成"""
        session = requests.Session()

        # リトライせず、エラーステータスのレスポンスもそのまま返す
        retry_strategy = Retry(total=0, raise_on_status=False)

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update(
            {"User-Agent": self.user_agent, "Accept": "application/json"}
        )

        return session

    def get(
        self,
        url: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        raise_for_status: bool = True,
    ) -> requests.Response:
        """
        GETリクエスト

        Args:
            url: リクエストURL
            params: クエリパラメータ
            headers: 追加ヘッダー
            raise_for_status: 2xx以外のステータスで例外を送出するか

        Returns:
            レスポンスオブジェクト

        Raises:
            HTTPError: リクエスト失敗時
        """
        try:
            logger.debug(f"GET request to {url}")
            response = self.session.get(
                url,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )

            if raise_for_status:
                response.raise_for_status()
            logger.debug(f"GET request completed: {url} (status={response.status_code})")
            return response

        except requests.RequestException as e:
            logger.error(f"GET request failed: {url} - {e}")
            raise HTTPError(f"Failed to GET {url}: {e}", _status_code_of(e)) from e

    def post(
        self,
        url: str,
        json: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        raise_for_status: bool = True,
    ) -> requests.Response:
        """
        POSTリクエスト

        Args:
            url: リクエストURL
            json: JSONデータ
            params: クエリパラメータ
            headers: 追加ヘッダー
            raise_for_status: 2xx以外のステータスで例外を送出するか

        Returns:
            レスポンスオブジェクト

        Raises:
            HTTPError: リクエスト失敗時
        """
        try:
            logger.debug(f"POST request to {url}")
            response = self.session.post(
                url,
                json=json,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )

            if raise_for_status:
                response.raise_for_status()
            logger.debug(f"POST request completed: {url} (status={response.status_code})")
            return response

        except requests.RequestException as e:
            logger.error(f"POST request failed: {url} - {e}")
            raise HTTPError(f"Failed to POST {url}: {e}", _status_code_of(e)) from e

    def close(self) -> None:
        """セッションをクローズ"""
        if self.session:
            self.session.close()
            logger.debug("HTTP session closed")

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


def _status_code_of(error: requests.RequestException) -> Optional[int]:
    """例外に紐づくレスポンスのステータスコードを取得"""
    if error.response is not None:
        return error.response.status_code
    return None
