"""ルート取得結果（成功・失敗のタグ付き結果）とコールバック"""
from dataclasses import dataclass
from typing import Optional, Protocol, Union

from .enums import FailureKind
from .route import Route


@dataclass(frozen=True)
class RouteSuccess:
    """ルート取得成功"""

    route: Route


@dataclass(frozen=True)
class RouteFailure:
    """ルート取得失敗"""

    kind: FailureKind
    status_code: Optional[int] = None  # HTTPステータス、またはサービスが報告したステータス
    message: Optional[str] = None
    error: Optional[Exception] = None  # 原因となった例外（あれば）

    def __str__(self) -> str:
        return f"{self.kind.value} (status={self.status_code}): {self.message or ''}"


RouteResult = Union[RouteSuccess, RouteFailure]


class RouteCallback(Protocol):
    """結果通知用コールバック（success/failureのどちらか一方が1回だけ呼ばれる）"""

    def success(self, route: Route) -> None: ...

    def failure(self, failure: RouteFailure) -> None: ...
