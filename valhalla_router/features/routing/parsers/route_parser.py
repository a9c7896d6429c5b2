"""Valhallaレスポンスのパーサー"""

import json
from typing import Any, Optional, Union

from ..domain.enums import FailureKind
from ..domain.results import RouteFailure, RouteResult, RouteSuccess
from ..domain.route import Route
from ....shared.exceptions.errors import ParsingError
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class RouteParser:
    """
    HTTPステータスとレスポンスボディからルート取得結果を生成

    - 2xx以外: HTTPステータスを持つ失敗
    - 2xxでサービスがルートなしを報告: サービスのステータスを持つ失敗
    - 2xxで正常なボディ: Route
    """

    def parse(self, status_code: int, body: Union[str, bytes, None]) -> RouteResult:
        """
        レスポンスを解析

        Args:
            status_code: HTTPステータスコード
            body: レスポンスボディ

        Returns:
            RouteResult: 成功（RouteSuccess）または失敗（RouteFailure）
        """
        if not 200 <= status_code < 300:
            return self._http_failure(status_code, body)

        try:
            return self._map_body(self.load_json(body))
        except ParsingError as e:
            logger.error(f"Invalid route response: {e}")
            return RouteFailure(
                kind=FailureKind.INVALID_RESPONSE,
                status_code=status_code,
                message=str(e),
                error=e,
            )

    def _map_body(self, data: dict[str, Any]) -> RouteResult:
        """
        2xxレスポンスのJSONを結果に変換

        Raises:
            ParsingError: ボディの形式が不正な場合
        """
        # HTTP 2xxでもサービス側のエラーを報告する場合がある
        if "error_code" in data:
            error_code = _to_int(data["error_code"], "error_code")
            logger.warning(f"Routing service reported error: {data.get('error')} ({error_code})")
            return RouteFailure(
                kind=FailureKind.NO_ROUTE,
                status_code=error_code,
                message=data.get("error"),
            )

        trip = data.get("trip")
        if not isinstance(trip, dict) or not isinstance(trip.get("legs"), list):
            raise ParsingError("Response is missing trip.legs")

        service_status = _to_int(trip.get("status", 0), "trip.status")
        if service_status != 0:
            logger.warning(
                f"No route found: {trip.get('status_message')} (status={service_status})"
            )
            return RouteFailure(
                kind=FailureKind.NO_ROUTE,
                status_code=service_status,
                message=trip.get("status_message"),
            )

        try:
            route = Route.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ParsingError(f"Failed to map route response: {e}") from e

        logger.debug(
            f"Parsed route: {len(route.legs)} legs, {len(route.maneuvers)} maneuvers"
        )
        return RouteSuccess(route)

    def load_json(self, body: Union[str, bytes, None]) -> dict[str, Any]:
        """
        ボディをJSONとして読み込む

        Raises:
            ParsingError: JSONオブジェクトとして解釈できない場合
        """
        if not body:
            raise ParsingError("Empty response body")
        try:
            data = json.loads(body)
        except ValueError as e:
            raise ParsingError(f"Response body is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ParsingError("Response body is not a JSON object")
        return data

    def _http_failure(
        self, status_code: int, body: Union[str, bytes, None]
    ) -> RouteFailure:
        """2xx以外のレスポンスを失敗に変換（エラーボディがあればメッセージに使用）"""
        message: Optional[str] = None
        try:
            data = self.load_json(body)
        except ParsingError as e:
            logger.debug(f"Error response has no JSON body: {e}")
        else:
            if "error" in data:
                message = f"{data['error']} ({data.get('error_code')})"

        logger.warning(f"Route request failed with HTTP {status_code}: {message or ''}")
        return RouteFailure(
            kind=FailureKind.HTTP_STATUS,
            status_code=status_code,
            message=message,
        )


def _to_int(value: Any, name: str) -> int:
    """
    ステータス値を整数に変換

    Raises:
        ParsingError: 整数として解釈できない場合
    """
    if isinstance(value, bool):
        raise ParsingError(f"{name} is not an integer: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ParsingError(f"{name} is not an integer: {value!r}") from e
