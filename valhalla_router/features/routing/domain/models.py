"""ルーティング機能のドメインモデル（リクエスト側）"""
from dataclasses import dataclass
from typing import Any, Optional

from .enums import DistanceUnits, TravelMode
from ....shared.exceptions.errors import MalformedRequestError, ValidationError

MIN_WAYPOINTS = 2


@dataclass(frozen=True)
class Waypoint:
    """経由地"""

    latitude: float  # 緯度
    longitude: float  # 経度
    heading: Optional[int] = None  # 進行方向（度, [0, 360)）
    name: Optional[str] = None  # 地点名
    street: Optional[str] = None  # 番地・通り
    city: Optional[str] = None  # 市区町村
    state: Optional[str] = None  # 州・都道府県

    def __post_init__(self) -> None:
        if self.heading is None:
            return
        # boolはintのサブクラスなので除外
        if isinstance(self.heading, bool) or not isinstance(self.heading, int):
            raise ValidationError(
                f"Heading must be an integer number of degrees: {self.heading!r}"
            )
        if not 0 <= self.heading < 360:
            raise ValidationError(
                f"Heading value must be in the range [0, 360): {self.heading}"
            )

    def to_dict(self) -> dict[str, Any]:
        """リクエスト用の辞書に変換（未設定の項目は含めない）"""
        data: dict[str, Any] = {"lat": self.latitude, "lon": self.longitude}
        for key in ("name", "street", "city", "state", "heading"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    def to_tuple(self) -> tuple[float, float]:
        """(緯度, 経度)のタプルとして返す"""
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class RouteRequest:
    """
    ルート検索リクエスト

    経由地は2点以上必要
    """

    waypoints: tuple[Waypoint, ...]
    travel_mode: TravelMode = TravelMode.AUTOMOBILE
    units: DistanceUnits = DistanceUnits.KILOMETERS
    language: Optional[str] = None
    max_hiking_difficulty: int = 1

    def __post_init__(self) -> None:
        if len(self.waypoints) < MIN_WAYPOINTS:
            raise MalformedRequestError(
                f"At least {MIN_WAYPOINTS} waypoints are required, got {len(self.waypoints)}"
            )

    def to_dict(self) -> dict[str, Any]:
        """リクエストドキュメント（JSON）に変換"""
        directions_options: dict[str, Any] = {"units": self.units.value}
        if self.language:
            directions_options["language"] = self.language

        costing_options: dict[str, Any] = {
            "max_hiking_difficulty": str(self.max_hiking_difficulty),
        }

        return {
            "locations": [waypoint.to_dict() for waypoint in self.waypoints],
            "costing": self.travel_mode.value,
            "directions_options": directions_options,
            "costing_options": costing_options,
        }
