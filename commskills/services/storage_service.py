"""
ローカルストレージサービス
練習セッションの記録をローカルのJSONファイルに保存・読み込む
"""
import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import List

from pydantic import ValidationError

from commskills.config import SESSIONS_DIR
from commskills.models.schemas import SessionRecord

logger = logging.getLogger(__name__)


class LocalSessionStore:
    """練習セッションの記録をローカルファイルで管理するストアクラス"""

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        初期化処理
        データ保存ディレクトリを作成する

        Args:
            data_dir: 保存先ディレクトリ（指定しない場合はSESSIONS_DIR）
        """
        self.data_dir: Path = data_dir or SESSIONS_DIR
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def save_session(self, record: SessionRecord) -> bool:
        """
        セッション記録を1件追加

        Args:
            record: 保存するセッション記録

        Returns:
            保存成功時True、失敗時False
        """
        try:
            timestamp: str = record.date.strftime("%Y%m%d_%H%M%S_%f")
            filename: str = f"session_{timestamp}_{uuid.uuid4().hex[:8]}.json"
            file_path: Path = self.data_dir / filename

            with open(file_path, "w", encoding="utf-8") as f:
                f.write(record.model_dump_json(indent=2))

            logger.info("セッションを保存しました: %s", file_path.name)
            return True
        except OSError:
            logger.exception("セッションの保存に失敗しました")
            return False

    def list_sessions(self, user_id: str | None = None) -> List[SessionRecord]:
        """
        保存済みのセッション記録を取得

        読み込めないファイルはスキップする。

        Args:
            user_id: 指定した場合、そのユーザーの記録のみを返す

        Returns:
            セッション記録のリスト（日時の新しい順）
        """
        sessions: List[SessionRecord] = []
        try:
            file_paths: List[Path] = list(self.data_dir.glob("session_*.json"))
        except OSError:
            logger.exception("セッション一覧の取得に失敗しました")
            return []

        for file_path in file_paths:
            record: SessionRecord | None = self.load_session(file_path.name)
            if record is None:
                continue
            if user_id is not None and record.user_id != user_id:
                continue
            sessions.append(record)

        sessions.sort(key=lambda s: _sort_key(s.date), reverse=True)
        return sessions

    def load_session(self, filename: str) -> SessionRecord | None:
        """
        セッション記録を1件読み込む

        Args:
            filename: ファイル名

        Returns:
            セッション記録、読み込み失敗時はNone
        """
        try:
            file_path: Path = self.data_dir / filename
            if not file_path.exists():
                return None

            with open(file_path, "r", encoding="utf-8") as f:
                return SessionRecord.model_validate(json.load(f))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("セッションの読み込みに失敗しました %s: %s", filename, str(e))
            return None

    def delete_sessions(self, user_id: str | None = None) -> bool:
        """
        セッション記録を削除

        Args:
            user_id: 指定した場合、そのユーザーの記録のみを削除（指定しない場合はすべて削除）

        Returns:
            削除成功時True、失敗時False
        """
        try:
            for file_path in self.data_dir.glob("session_*.json"):
                if user_id is not None:
                    record: SessionRecord | None = self.load_session(file_path.name)
                    if record is None or record.user_id != user_id:
                        continue
                file_path.unlink()
            return True
        except OSError:
            logger.exception("セッションの削除に失敗しました")
            return False


def _sort_key(value: datetime) -> float:
    # タイムゾーンなしの日時はローカル時刻として比較する
    return value.timestamp()
