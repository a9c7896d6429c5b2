"""CLIエントリーポイント"""
import argparse
import sys
from typing import Optional

from .features.routing.domain.enums import DistanceUnits, TravelMode
from .features.routing.domain.results import RouteFailure
from .features.routing.domain.route import Route
from .features.routing.providers.valhalla_http_handler import ValhallaHttpHandler
from .features.routing.services.valhalla_router import ValhallaRouter
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import ValhallaRouterError
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)


def parse_point(value: str) -> tuple[float, float]:
    """
    "緯度,経度" 形式の文字列を座標に変換

    Raises:
        argparse.ArgumentTypeError: 形式が不正な場合
    """
    try:
        lat_text, lon_text = value.split(",")
        return float(lat_text), float(lon_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected LAT,LON but got: {value}")


class PrintingCallback:
    """結果を標準出力に表示するコールバック"""

    def __init__(self) -> None:
        self.failure_result: Optional[RouteFailure] = None

    def success(self, route: Route) -> None:
        units = route.units or ""
        print(f"Total: {route.total_distance:.2f} {units}, {route.total_time / 60:.1f} min")
        for index, maneuver in enumerate(route.maneuvers, start=1):
            print(f"{index:3d}. {maneuver.instruction} ({maneuver.length:.2f} {units})")

    def failure(self, failure: RouteFailure) -> None:
        self.failure_result = failure
        print(f"Route not available: {failure}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Valhallaルート検索ツール")

    parser.add_argument(
        "--from",
        dest="origin",
        type=parse_point,
        required=True,
        help="出発地（例: 40.659241,-73.983776）",
    )
    parser.add_argument(
        "--via",
        type=parse_point,
        action="append",
        default=[],
        help="経由地（複数指定可）",
    )
    parser.add_argument(
        "--to",
        dest="destination",
        type=parse_point,
        required=True,
        help="目的地",
    )
    parser.add_argument(
        "--heading",
        type=int,
        help="出発地での進行方向（度, 0-359）",
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=[mode.value for mode in TravelMode],
        default=TravelMode.AUTOMOBILE.value,
        help="移動手段（デフォルト: auto）",
    )
    parser.add_argument(
        "--units",
        type=str,
        choices=[units.value for units in DistanceUnits],
        help="距離単位",
    )
    parser.add_argument(
        "--language",
        type=str,
        help="案内言語（例: en-US）",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 成功, 1: 失敗）
    """
    args = build_parser().parse_args(argv)

    try:
        settings = Settings(_env_file=args.env_file)

        if args.log_level:
            settings.log_level = args.log_level

        setup_logging(level=settings.log_level)

        with ValhallaHttpHandler.from_settings(settings) as handler:
            router = ValhallaRouter.from_settings(settings, http_handler=handler)
            callback = PrintingCallback()
            router.set_callback(callback).set_travel_mode(args.mode)

            if args.units:
                router.set_distance_units(args.units)
            if args.language:
                router.set_language(args.language)

            router.add_waypoint(*args.origin, heading=args.heading)
            for point in args.via:
                router.add_waypoint(*point)
            router.add_waypoint(*args.destination)

            router.run()

        return 1 if callback.failure_result else 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except ValhallaRouterError as e:
        logger.error(f"Routing failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
