"""
データモデル（スキーマ定義）
"""

from datetime import datetime, timezone
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """タイムゾーン付きのUTCの現在時刻"""
    return datetime.now(timezone.utc)


class SpeechAnalysis(BaseModel):
    """発話分析結果のデータモデル（生成後は変更不可）"""

    model_config = ConfigDict(frozen=True)

    word_count: int = 0  # 空白区切りの単語数
    filler_words: frozenset[str] = frozenset()  # 検出されたフィラーの種類
    filler_count: int = 0  # フィラーの出現回数（重複を含む）
    speaking_rate: int = 0  # 話速（words per minute）
    pause_count: int = 0  # 文の区切りから推定したポーズ数
    clarity: int = 100  # 明瞭さスコア（0-100）
    confidence: int = 0  # 認識信頼度スコア（0-100）
    suggestions: tuple[str, ...] = ()  # 改善提案（空になることはない）


class TranscriptSnapshot(BaseModel):
    """音声認識結果のスナップショット"""

    model_config = ConfigDict(frozen=True)

    text: str = ""  # 認識テキスト（確定部分 + 暫定部分）
    confidence: float = 0.0  # 認識信頼度（0-1）


class AttemptRecord(BaseModel):
    """発音練習の1回分の試行記録"""

    model_config = ConfigDict(frozen=True)

    target: str  # 目標の単語または文
    spoken: str  # 認識されたテキスト
    accuracy: int  # 一致度（0-100）
    confidence: int  # 認識信頼度スコア（0-100）
    analysis: SpeechAnalysis
    timestamp: datetime = Field(default_factory=utc_now)


class SessionRecord(BaseModel):
    """練習セッションの記録（外部ストアに保存される）"""

    model_config = ConfigDict(extra="allow")

    user_id: str | None = None
    session_type: str = ""  # "conversation" または "pronunciation"
    transcript_text: str = ""
    word_count: int = 0
    filler_words: int = 0  # フィラーの出現回数
    speaking_rate: int = 0
    confidence: float = 0  # 認識信頼度スコア（0-100）
    session_duration: float = 0  # セッション時間（秒）
    date: datetime = Field(default_factory=utc_now)
    accuracy: int | None = None  # 発音練習のみ
    target: str | None = None  # 発音練習のみ


class DashboardStats(BaseModel):
    """ダッシュボード表示用の集計値"""

    total_sessions: int = 0
    total_duration_minutes: int = 0
    average_confidence: int = 0
    streak: int = 0


class PracticeWord(BaseModel):
    """発音練習用の単語"""

    word: str
    difficulty: Literal["Easy", "Medium", "Hard"]
    phonetic: str


class ConversationQuestion(BaseModel):
    """会話練習用の質問"""

    id: int
    category: str
    question: str
    tips: List[str]
