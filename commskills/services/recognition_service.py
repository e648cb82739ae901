"""
音声認識結果の集約
認識エンジンから逐次届く確定/暫定の結果をまとめ、分析に渡すスナップショットを作る
"""
import logging

from commskills.models.schemas import TranscriptSnapshot

logger = logging.getLogger(__name__)


class TranscriptAccumulator:
    """音声認識の確定テキストと暫定テキストを保持するクラス"""

    def __init__(self) -> None:
        """初期化処理"""
        self.final_text: str = ""
        self.interim_text: str = ""
        self.confidence: float = 0.0
        self.error: str | None = None

    def add_result(self, text: str, is_final: bool, confidence: float | None = None) -> None:
        """
        認識結果を1件追加

        確定結果はテキストに追記し、その信頼度を記録する。
        暫定結果は直前の暫定テキストを置き換える。

        Args:
            text: 認識テキスト
            is_final: 確定結果かどうか
            confidence: 認識信頼度（0-1、確定結果のみ使用）
        """
        if is_final:
            self.final_text += text
            self.interim_text = ""
            if confidence is not None:
                self.confidence = confidence
        else:
            self.interim_text = text

    def fail(self, reason: str) -> None:
        """認識エラーを記録"""
        self.error = f"Speech recognition error: {reason}"
        logger.warning(self.error)

    def reset(self) -> None:
        """テキスト・信頼度・エラーをすべて消去"""
        self.final_text = ""
        self.interim_text = ""
        self.confidence = 0.0
        self.error = None

    @property
    def transcript(self) -> str:
        """確定テキスト + 暫定テキスト"""
        return self.final_text + self.interim_text

    def snapshot(self) -> TranscriptSnapshot:
        """現在の認識結果の変更不可なスナップショットを返す"""
        return TranscriptSnapshot(text=self.transcript, confidence=self.confidence)
