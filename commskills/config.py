"""
アプリケーション設定
データディレクトリ、ログ設定、環境変数による設定値を提供する
"""
import logging
import os
import sys
from pathlib import Path


def get_app_data_dir() -> Path:
    """
    アプリケーションのデータディレクトリを取得

    COMMSKILLS_DATA_DIR環境変数が設定されている場合はそれを優先する

    Returns:
        アプリケーションデータディレクトリのパス
    """
    override: str | None = os.getenv("COMMSKILLS_DATA_DIR")
    if override:
        return Path(override)
    if sys.platform == "win32":
        # Windowsの場合、AppData\Local\CommSkillsを使用
        app_data: str | None = os.getenv("LOCALAPPDATA")
        if app_data:
            return Path(app_data) / "CommSkills"
    elif sys.platform == "darwin":
        # macOSの場合、~/Library/Application Support/CommSkillsを使用
        return Path.home() / "Library" / "Application Support" / "CommSkills"
    # その他のOSまたはフォールバック
    return Path.home() / ".commskills"


def get_config_file() -> Path:
    """
    設定ファイルのパスを取得

    Returns:
        設定ファイルのパス
    """
    return get_app_data_dir() / "config.json"


def get_log_file() -> Path:
    """
    ログファイルのパスを取得

    Returns:
        ログファイルのパス
    """
    return get_app_data_dir() / "app.log"


def get_int_setting(name: str, default: int) -> int:
    """
    整数の設定値を環境変数から取得

    Args:
        name: 環境変数名
        default: 未設定または不正な値の場合のデフォルト値

    Returns:
        設定値
    """
    raw: str | None = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "環境変数%sの値が整数ではありません: %r (デフォルト値%dを使用)", name, raw, default
        )
        return default


def setup_logging(log_file: Path | None = None, level: str | None = None) -> None:
    """
    ログ出力を設定する（ファイルとコンソール）

    Args:
        log_file: ログファイルのパス（指定しない場合はLOG_FILE）
        level: ログレベル名（指定しない場合はCOMMSKILLS_LOG_LEVEL環境変数、既定はINFO）
    """
    log_path: Path = log_file or LOG_FILE
    level_name: str = (level or os.getenv("COMMSKILLS_LOG_LEVEL", "INFO")).upper()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    except OSError as e:
        # ファイルに書けない環境ではコンソールのみ
        print(f"ログファイルを作成できませんでした {log_path}: {str(e)}")

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


# アプリケーションデータディレクトリ
APP_DATA_DIR = get_app_data_dir()

# 設定ファイル
CONFIG_FILE = get_config_file()

# ログファイル
LOG_FILE = get_log_file()

# セッション記録の保存ディレクトリ
SESSIONS_DIR = APP_DATA_DIR / "sessions"

# 発音練習の直近の試行履歴の保持件数
RECENT_ATTEMPTS_LIMIT = get_int_setting("COMMSKILLS_RECENT_ATTEMPTS", 5)
