"""
練習サービス
発話分析・一致度評価・セッション保存・ストリーク計算をまとめて練習の流れを実行する
"""
import logging
from datetime import datetime, timezone
from typing import List

from commskills.config import RECENT_ATTEMPTS_LIMIT
from commskills.models.schemas import (
    AttemptRecord,
    DashboardStats,
    SessionRecord,
    SpeechAnalysis,
    TranscriptSnapshot,
)
from commskills.services.accuracy_service import calculate_accuracy
from commskills.services.analysis_service import analyze_speech, round_half_up
from commskills.services.history_service import push_attempt
from commskills.services.storage_service import LocalSessionStore
from commskills.services.streak_service import calculate_longest_streak

logger = logging.getLogger(__name__)

SESSION_TYPE_CONVERSATION = "conversation"
SESSION_TYPE_PRONUNCIATION = "pronunciation"


def build_session_record(
    analysis: SpeechAnalysis,
    duration: float,
    session_type: str,
    transcript: str,
    user_id: str | None = None,
    accuracy: int | None = None,
    target: str | None = None,
    date: datetime | None = None,
) -> SessionRecord:
    """
    分析結果から保存用のセッション記録を作成

    Args:
        analysis: 発話分析結果
        duration: セッション時間（秒）
        session_type: セッション種別（conversation / pronunciation）
        transcript: 認識テキスト
        user_id: ユーザーID
        accuracy: 発音練習の一致度
        target: 発音練習の目標テキスト
        date: 記録日時（指定しない場合はUTCの現在時刻）

    Returns:
        セッション記録
    """
    return SessionRecord(
        user_id=user_id,
        session_type=session_type,
        transcript_text=transcript,
        word_count=analysis.word_count,
        filler_words=analysis.filler_count,
        speaking_rate=analysis.speaking_rate,
        confidence=analysis.confidence,
        session_duration=duration,
        date=date or datetime.now(timezone.utc),
        accuracy=accuracy,
        target=target,
    )


def summarize_sessions(sessions: List[SessionRecord], streak: int) -> DashboardStats:
    """
    セッション記録からダッシュボードの集計値を計算

    Args:
        sessions: セッション記録のリスト
        streak: 連続練習日数

    Returns:
        集計値（DashboardStatsオブジェクト）
    """
    total_duration: float = sum(s.session_duration for s in sessions)
    average_confidence: int = 0
    if sessions:
        average_confidence = round_half_up(sum(s.confidence for s in sessions) / len(sessions))

    return DashboardStats(
        total_sessions=len(sessions),
        total_duration_minutes=round_half_up(total_duration / 60),
        average_confidence=average_confidence,
        streak=streak,
    )


class PracticeService:
    """会話練習と発音練習の流れを実行するサービスクラス"""

    def __init__(
        self,
        store: LocalSessionStore | None = None,
        user_id: str | None = None,
        recent_limit: int = RECENT_ATTEMPTS_LIMIT,
    ) -> None:
        """
        初期化処理

        Args:
            store: セッション記録のストア（指定しない場合はLocalSessionStore）
            user_id: サインイン中のユーザーID（未サインインの場合はNone）
            recent_limit: 直近の試行履歴の保持件数
        """
        self.store: LocalSessionStore = store if store is not None else LocalSessionStore()
        self.user_id: str | None = user_id
        self.recent_limit: int = recent_limit
        self.sessions: List[SessionRecord] = []
        self.recent_attempts: tuple[AttemptRecord, ...] = ()
        self.streak: int = 0
        self.error: str | None = None

    def refresh(self) -> List[SessionRecord]:
        """
        ストアからセッション記録を読み直し、ストリークを再計算

        Returns:
            セッション記録のリスト（新しい順）
        """
        if self.user_id is None:
            self.sessions = []
        else:
            self.sessions = self.store.list_sessions(self.user_id)
        self.streak = calculate_longest_streak(self.sessions)
        return self.sessions

    def save_session(self, record: SessionRecord) -> bool:
        """
        セッション記録を保存して一覧を更新

        未サインインの場合は保存しない。保存の再試行は行わない。

        Returns:
            保存成功時True、失敗時False
        """
        if self.user_id is None:
            logger.error("ユーザーが認証されていないため、セッションを保存できません")
            return False

        if not self.store.save_session(record.model_copy(update={"user_id": self.user_id})):
            self.error = "Failed to save session."
            return False

        self.error = None
        self.refresh()
        return True

    def complete_attempt(
        self,
        target: str,
        snapshot: TranscriptSnapshot,
        duration: float,
    ) -> AttemptRecord | None:
        """
        発音練習の1回分の録音を評価して記録

        Args:
            target: 目標の単語または文
            snapshot: 録音終了時の認識結果
            duration: 録音時間（秒）

        Returns:
            試行記録、認識テキストが空の場合はNone
        """
        if not snapshot.text:
            return None

        analysis: SpeechAnalysis = analyze_speech(snapshot.text, duration, snapshot.confidence)
        accuracy: int = calculate_accuracy(snapshot.text, target)

        attempt = AttemptRecord(
            target=target,
            spoken=snapshot.text,
            accuracy=accuracy,
            confidence=round_half_up(snapshot.confidence * 100),
            analysis=analysis,
        )
        self.recent_attempts = push_attempt(self.recent_attempts, attempt, self.recent_limit)

        self.save_session(
            build_session_record(
                analysis,
                duration,
                SESSION_TYPE_PRONUNCIATION,
                snapshot.text,
                accuracy=accuracy,
                target=target,
            )
        )
        return attempt

    def complete_conversation(
        self,
        snapshot: TranscriptSnapshot,
        duration: float,
    ) -> SpeechAnalysis | None:
        """
        会話練習の回答を分析して記録

        Args:
            snapshot: 録音終了時の認識結果
            duration: 回答時間（秒）

        Returns:
            分析結果、認識テキストが空の場合はNone
        """
        if not snapshot.text:
            return None

        analysis: SpeechAnalysis = analyze_speech(snapshot.text, duration, snapshot.confidence)
        self.save_session(
            build_session_record(analysis, duration, SESSION_TYPE_CONVERSATION, snapshot.text)
        )
        return analysis

    def clear_attempts(self) -> None:
        """練習対象を変えたときに直近の試行履歴を消去"""
        self.recent_attempts = ()

    def dashboard_stats(self) -> DashboardStats:
        """現在のセッション記録からダッシュボードの集計値を返す"""
        return summarize_sessions(self.sessions, self.streak)
