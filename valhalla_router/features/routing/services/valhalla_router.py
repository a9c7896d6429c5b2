"""ルート検索サービス（リクエスト構築・送信・結果通知）"""

import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Optional, Union

from ..domain.enums import DistanceUnits, FailureKind, Language, TravelMode
from ..domain.models import RouteRequest, Waypoint
from ..domain.results import RouteCallback, RouteFailure, RouteResult, RouteSuccess
from ..parsers.route_parser import RouteParser
from ..providers.valhalla_http_handler import ValhallaHttpHandler
from ....infrastructure.config.settings import Settings
from ....shared.exceptions.errors import ConfigurationError, HTTPError
from ....shared.logging.config import get_logger
from ....shared.utils.locale_utils import resolve_language

logger = get_logger(__name__)

# fetch() で executor 未指定時に使用する共有プール
# 生成は初回のfetch()時、破棄はshutdown_default_executor()で行う
_default_executor: Optional[ThreadPoolExecutor] = None
_default_executor_lock = threading.Lock()


def _get_default_executor() -> ThreadPoolExecutor:
    global _default_executor
    with _default_executor_lock:
        if _default_executor is None:
            _default_executor = ThreadPoolExecutor(thread_name_prefix="valhalla-router")
        return _default_executor


def shutdown_default_executor(wait: bool = True) -> None:
    """
    共有スレッドプールを停止

    停止後に executor 未指定で fetch() を呼ぶと新しいプールを生成する

    Args:
        wait: 実行中のリクエストの完了を待つか
    """
    global _default_executor
    with _default_executor_lock:
        executor, _default_executor = _default_executor, None
    if executor is not None:
        executor.shutdown(wait=wait)
        logger.debug("Default executor shut down")


class ValhallaRouter:
    """
    Valhallaルーター

    経由地とオプションを蓄積し、リクエストを1回送信して
    結果をコールバック（success/failureのどちらか一方）で通知する。
    各メソッドはselfを返すため、メソッドチェーンで設定できる。

    Example:
        router = (
            ValhallaRouter(http_handler=handler)
            .add_waypoint(40.659241, -73.983776)
            .add_waypoint(40.671773, -73.981115)
            .set_biking()
            .set_callback(callback)
        )
        router.run()
    """

    def __init__(
        self,
        http_handler: Optional[ValhallaHttpHandler] = None,
        parser: Optional[RouteParser] = None,
        default_language: str = Language.EN_US.value,
    ) -> None:
        """
        Args:
            http_handler: HTTP送信ハンドラー
            parser: レスポンスパーサー（Noneの場合はRouteParser）
            default_language: ロケールから言語を決定できない場合の言語
        """
        self.http_handler = http_handler
        self.parser = parser or RouteParser()
        self.default_language = default_language

        self.waypoints: list[Waypoint] = []
        self.travel_mode = TravelMode.AUTOMOBILE
        self.units = DistanceUnits.KILOMETERS
        self.language: Optional[str] = None
        self.max_hiking_difficulty = 1
        self.callback: Optional[RouteCallback] = None

    @classmethod
    def from_settings(
        cls, settings: Settings, http_handler: Optional[ValhallaHttpHandler] = None
    ) -> "ValhallaRouter":
        """
        設定からルーターを生成

        Args:
            settings: アプリケーション設定
            http_handler: HTTP送信ハンドラー（Noneの場合は設定から生成）
        """
        router = cls(
            http_handler=http_handler or ValhallaHttpHandler.from_settings(settings),
            default_language=settings.default_language,
        )
        router.set_distance_units(DistanceUnits.from_value(settings.default_units))
        return router

    # ----------------
    # 設定
    # ----------------
    def set_http_handler(self, handler: ValhallaHttpHandler) -> "ValhallaRouter":
        self.http_handler = handler
        return self

    def set_callback(self, callback: RouteCallback) -> "ValhallaRouter":
        self.callback = callback
        return self

    def add_waypoint(
        self,
        latitude: float,
        longitude: float,
        heading: Optional[int] = None,
        name: Optional[str] = None,
        street: Optional[str] = None,
        city: Optional[str] = None,
        state: Optional[str] = None,
    ) -> "ValhallaRouter":
        """
        経由地を追加

        Raises:
            ValidationError: headingが [0, 360) の範囲外の場合
        """
        waypoint = Waypoint(
            latitude=latitude,
            longitude=longitude,
            heading=heading,
            name=name,
            street=street,
            city=city,
            state=state,
        )
        self.waypoints.append(waypoint)
        return self

    def clear_waypoints(self) -> "ValhallaRouter":
        self.waypoints.clear()
        return self

    def set_travel_mode(self, mode: Union[TravelMode, str]) -> "ValhallaRouter":
        if not isinstance(mode, TravelMode):
            mode = TravelMode.from_value(mode)
        self.travel_mode = mode
        return self

    def set_driving(self) -> "ValhallaRouter":
        return self.set_travel_mode(TravelMode.AUTOMOBILE)

    def set_biking(self) -> "ValhallaRouter":
        return self.set_travel_mode(TravelMode.BICYCLE)

    def set_walking(self) -> "ValhallaRouter":
        return self.set_travel_mode(TravelMode.PEDESTRIAN)

    def set_multimodal(self) -> "ValhallaRouter":
        return self.set_travel_mode(TravelMode.MULTIMODAL)

    def set_distance_units(self, units: Union[DistanceUnits, str]) -> "ValhallaRouter":
        if not isinstance(units, DistanceUnits):
            units = DistanceUnits.from_value(units)
        self.units = units
        return self

    def set_language(self, language: Union[Language, str]) -> "ValhallaRouter":
        self.language = language.value if isinstance(language, Language) else language
        return self

    def set_max_hiking_difficulty(self, difficulty: int) -> "ValhallaRouter":
        self.max_hiking_difficulty = difficulty
        return self

    # ----------------
    # リクエスト構築
    # ----------------
    def build_request(self) -> RouteRequest:
        """
        現在の設定からリクエストを構築

        Raises:
            MalformedRequestError: 経由地が2点未満の場合
        """
        return RouteRequest(
            waypoints=tuple(self.waypoints),
            travel_mode=self.travel_mode,
            units=self.units,
            language=self.language or self.get_default_language(),
            max_hiking_difficulty=self.max_hiking_difficulty,
        )

    def get_json_request(self) -> dict[str, Any]:
        """送信するリクエストドキュメントを取得"""
        return self.build_request().to_dict()

    def get_default_language(self) -> str:
        """プロセスのロケールから案内言語を決定"""
        return resolve_language(self.default_language, Language.is_supported)

    # ----------------
    # 送信
    # ----------------
    def run(self) -> RouteResult:
        """
        リクエストを同期的に1回送信し、結果をコールバックに通知

        Returns:
            RouteResult: 取得結果

        Raises:
            MalformedRequestError: 経由地が2点未満の場合（送信前）
            ConfigurationError: HTTPハンドラーが未設定の場合
        """
        document = self.get_json_request()

        if self.http_handler is None:
            raise ConfigurationError("HTTP handler is not set")

        logger.info(
            f"Requesting route: {len(self.waypoints)} waypoints, costing={self.travel_mode.value}"
        )

        result: RouteResult
        try:
            response = self.http_handler.request_route(document)
        except HTTPError as e:
            logger.error(f"Route request transport failure: {e}")
            result = RouteFailure(
                kind=FailureKind.TRANSPORT,
                status_code=e.status_code,
                message=str(e),
                error=e,
            )
        else:
            result = self.parser.parse(response.status_code, response.body)

        self._deliver(result)
        return result

    def fetch(self, executor: Optional[Executor] = None) -> "Future[RouteResult]":
        """
        run() をバックグラウンドで実行

        リクエストの構築エラーは呼び出し時点で送出する

        Args:
            executor: 実行に使用するExecutor（Noneの場合は共有スレッドプール。
                終了時は shutdown_default_executor() で停止する）

        Returns:
            Future[RouteResult]: 取得結果のFuture
        """
        # 経由地不足はここで検出する
        self.build_request()
        if self.http_handler is None:
            raise ConfigurationError("HTTP handler is not set")

        return (executor or _get_default_executor()).submit(self.run)

    def _deliver(self, result: RouteResult) -> None:
        """結果をコールバックに1回だけ通知"""
        if self.callback is None:
            logger.debug("No callback set, result is only returned")
            return

        if isinstance(result, RouteSuccess):
            self.callback.success(result.route)
        else:
            self.callback.failure(result)
