"""ルーティング機能のEnum定義"""
from enum import Enum


class TravelMode(str, Enum):
    """移動手段（Valhallaのcosting名）"""

    AUTOMOBILE = "auto"
    BICYCLE = "bicycle"
    PEDESTRIAN = "pedestrian"
    MULTIMODAL = "multimodal"

    @classmethod
    def from_value(cls, value: str) -> "TravelMode":
        """costing名または列挙名から取得"""
        try:
            return cls(value.lower())
        except ValueError:
            pass
        try:
            return cls[value.upper()]
        except KeyError:
            raise ValueError(f"Invalid travel mode: {value}")


class DistanceUnits(str, Enum):
    """距離単位"""

    KILOMETERS = "kilometers"
    MILES = "miles"

    @classmethod
    def from_value(cls, value: str) -> "DistanceUnits":
        """単位名から取得（km, mi の省略形も可）"""
        aliases = {"km": cls.KILOMETERS, "mi": cls.MILES}
        normalized = value.strip().lower()
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Invalid distance units: {value}")


class Language(str, Enum):
    """案内文の言語（サービスがサポートする言語タグ）"""

    CA_ES = "ca-ES"
    CS_CZ = "cs-CZ"
    DE_DE = "de-DE"
    EN_US = "en-US"
    PIRATE = "en-US-x-pirate"
    ES_ES = "es-ES"
    FR_FR = "fr-FR"
    HI_IN = "hi-IN"
    IT_IT = "it-IT"
    PT_PT = "pt-PT"
    RU_RU = "ru-RU"
    SL_SI = "sl-SI"
    SV_SE = "sv-SE"

    @classmethod
    def is_supported(cls, tag: str) -> bool:
        """言語タグがサポート対象かどうか"""
        return any(language.value == tag for language in cls)


class FailureKind(str, Enum):
    """ルート取得失敗の種別"""

    HTTP_STATUS = "http_status"  # 2xx以外のHTTPステータス
    NO_ROUTE = "no_route"  # サービスがルートなしを報告
    TRANSPORT = "transport"  # 接続エラー・タイムアウト
    INVALID_RESPONSE = "invalid_response"  # レスポンスの形式不正
