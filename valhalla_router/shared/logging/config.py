"""ロギング設定"""
import logging
import sys

# ロガー設定済みフラグ
_logger_configured = False


def setup_logging(level: str = "INFO", force: bool = False) -> None:
    """
    ロギングを設定

    Args:
        level: ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        force: 設定済みでも再設定するか
    """
    global _logger_configured

    if _logger_configured and not force:
        return

    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 既存のハンドラーをクリア
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # サードパーティライブラリのログレベルを調整
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)

    _logger_configured = True
    logging.info(f"Logging configured with level: {level}")


def get_logger(name: str) -> logging.Logger:
    """
    指定名のロガーを取得

    Args:
        name: ロガー名（通常は__name__を指定）

    Returns:
        ロガーインスタンス
    """
    return logging.getLogger(name)
