"""
発音練習の一致度評価サービス
"""
from typing import List

from commskills.services.analysis_service import require_text, round_half_up

EXCELLENT_ACCURACY = 90
GOOD_ACCURACY = 70


def tokenize(text: str) -> List[str]:
    """半角スペース1文字で分割する（空文字列は単語なしとして扱う）"""
    return text.split(" ") if text else []


def calculate_accuracy(spoken: str, target: str) -> int:
    """
    発話テキストと目標テキストの一致度を計算

    大文字小文字を区別せず、先頭から同じ位置の単語同士を比較する。
    単語の挿入や脱落があるとそれ以降の位置がすべてずれる。

    Args:
        spoken: 認識されたテキスト
        target: 目標の単語または文

    Returns:
        一致度（0-100）。両方とも単語がない場合は0
    """
    spoken_words: List[str] = tokenize(require_text(spoken, "spoken").lower())
    target_words: List[str] = tokenize(require_text(target, "target").lower())

    max_length: int = max(len(spoken_words), len(target_words))
    if max_length == 0:
        return 0

    matches: int = sum(1 for s, t in zip(spoken_words, target_words) if s == t)
    return round_half_up(matches / max_length * 100)


def accuracy_level(accuracy: int) -> str:
    """
    一致度を表示用の段階に変換

    Returns:
        "excellent"（90以上）、"good"（70以上）、"needs_practice"のいずれか
    """
    if accuracy >= EXCELLENT_ACCURACY:
        return "excellent"
    if accuracy >= GOOD_ACCURACY:
        return "good"
    return "needs_practice"
