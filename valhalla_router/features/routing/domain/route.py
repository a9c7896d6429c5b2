"""ルーティング機能のドメインモデル（レスポンス側）"""
import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from polyline_rs import decode_latlon

# Valhallaのshapeはpolyline6（精度1e-6）
SHAPE_PRECISION = 6

LatLon = tuple[float, float]


@dataclass(frozen=True)
class Summary:
    """距離・所要時間のサマリー"""

    length: float = 0.0  # 距離（ルートの単位）
    time: float = 0.0  # 所要時間（秒）

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "Summary":
        data = data or {}
        return cls(length=float(data.get("length", 0.0)), time=float(data.get("time", 0.0)))


@dataclass(frozen=True)
class Maneuver:
    """ターンバイターンの案内1件"""

    type: int
    instruction: str
    time: float  # 秒
    length: float  # ルートの単位
    begin_shape_index: int
    end_shape_index: int
    verbal_pre_transition_instruction: Optional[str] = None
    verbal_post_transition_instruction: Optional[str] = None
    street_names: tuple[str, ...] = ()
    travel_mode: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Maneuver":
        """レスポンスのmaneuver要素から生成"""
        return cls(
            type=int(data.get("type", 0)),
            instruction=data.get("instruction", ""),
            time=float(data.get("time", 0.0)),
            length=float(data.get("length", 0.0)),
            begin_shape_index=int(data.get("begin_shape_index", 0)),
            end_shape_index=int(data.get("end_shape_index", 0)),
            verbal_pre_transition_instruction=data.get("verbal_pre_transition_instruction"),
            verbal_post_transition_instruction=data.get("verbal_post_transition_instruction"),
            street_names=tuple(data.get("street_names", ())),
            travel_mode=data.get("travel_mode"),
        )

    def points(self, leg_geometry: list[LatLon]) -> list[LatLon]:
        """レッグの座標列のうち、この案内が対象とする区間を返す"""
        return leg_geometry[self.begin_shape_index : self.end_shape_index + 1]


@dataclass(frozen=True)
class Leg:
    """連続する2経由地間の区間"""

    shape: str  # polyline6エンコード済み
    maneuvers: tuple[Maneuver, ...]
    summary: Summary = field(default_factory=Summary)
    # デコード済みの座標列 [(緯度, 経度), ...]
    geometry: list[LatLon] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Leg":
        """
        レスポンスのleg要素から生成

        Raises:
            ValueError: shapeがpolylineとしてデコードできない場合
        """
        shape = data.get("shape", "")
        return cls(
            shape=shape,
            maneuvers=tuple(Maneuver.from_dict(m) for m in data.get("maneuvers", [])),
            summary=Summary.from_dict(data.get("summary")),
            geometry=decode_shape(shape),
        )


def decode_shape(shape: str) -> list[LatLon]:
    """polyline6のshapeを [(緯度, 経度), ...] にデコード"""
    if not shape:
        return []
    return [(lat, lon) for lat, lon in decode_latlon(shape, SHAPE_PRECISION)]


@dataclass(frozen=True)
class Route:
    """
    ルート検索結果

    デコード成功時に一度だけ生成され、以降は変更しない。
    診断用に元のレスポンス（raw）を保持する。
    """

    legs: tuple[Leg, ...]
    summary: Summary
    raw: dict[str, Any] = field(repr=False, compare=False)
    units: Optional[str] = None
    language: Optional[str] = None
    status: int = 0
    status_message: Optional[str] = None
    locations: tuple[dict[str, Any], ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Route":
        """レスポンスJSON全体から生成"""
        trip = data["trip"]
        return cls(
            legs=tuple(Leg.from_dict(leg) for leg in trip["legs"]),
            summary=Summary.from_dict(trip.get("summary")),
            raw=copy.deepcopy(data),
            units=trip.get("units"),
            language=trip.get("language"),
            status=int(trip.get("status", 0)),
            status_message=trip.get("status_message"),
            locations=tuple(trip.get("locations", ())),
        )

    def found_route(self) -> bool:
        """ルートが見つかったかどうか"""
        return self.status == 0

    @property
    def total_distance(self) -> float:
        """総距離（ルートの単位）"""
        return self.summary.length

    @property
    def total_time(self) -> float:
        """総所要時間（秒）"""
        return self.summary.time

    @property
    def maneuvers(self) -> list[Maneuver]:
        """全レッグの案内を順に並べたもの"""
        return [maneuver for leg in self.legs for maneuver in leg.maneuvers]

    @property
    def geometry(self) -> list[LatLon]:
        """全レッグの座標列を連結したもの"""
        return [point for leg in self.legs for point in leg.geometry]
