"""
発話分析サービス
音声認識のテキスト・録音時間・認識信頼度から発話の品質を評価する
"""
import logging
import math
import re
from numbers import Real
from typing import List

from commskills.exceptions import InvalidArgumentError
from commskills.models.schemas import SpeechAnalysis

logger = logging.getLogger(__name__)

# 部分一致で判定するため "so" は "also" などにも一致する
FILLER_WORDS: tuple[str, ...] = (
    "um", "uh", "like", "you know", "so", "actually", "basically", "literally",
    "kind of", "sort of", "i mean", "well", "right", "okay", "yeah",
)

WEAK_PHRASES: tuple[str, ...] = (
    "i think", "i guess", "maybe", "probably", "i suppose", "perhaps",
    "sort of", "kind of", "i believe", "it seems",
)

SENTENCE_DELIMITER = re.compile(r"[.!?]+")

# ブラウザの音声認識と同じ空白文字の集合（U+FEFFを含み、U+001C-U+001Fを含まない）
WHITESPACE = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)

MIN_SPEAKING_RATE = 120
MAX_SPEAKING_RATE = 180
FILLER_RATIO_LIMIT = 0.1
WEAK_PHRASE_LIMIT = 2
MAX_AVERAGE_SENTENCE_LENGTH = 25

SUGGESTION_REDUCE_FILLERS = 'Try to reduce filler words like "um", "uh", and "like"'
SUGGESTION_SPEAK_FASTER = "Consider speaking a bit faster - aim for 120-150 words per minute"
SUGGESTION_SPEAK_SLOWER = "Try speaking more slowly for better clarity - aim for 120-150 words per minute"
SUGGESTION_CONFIDENT_LANGUAGE = 'Use more confident language - avoid phrases like "I think" or "maybe"'
SUGGESTION_SHORTER_SENTENCES = "Break up long sentences for better clarity"
SUGGESTION_GREAT_JOB = "Great job! Your speech shows good clarity and confidence"


def round_half_up(value: float) -> int:
    """
    0.5を正の無限大方向に丸める（Pythonのround()は偶数丸めのため使用しない）

    Raises:
        InvalidArgumentError: 計算結果が有限の値でない場合（極端に短い録音時間など）
    """
    if not math.isfinite(value):
        raise InvalidArgumentError(f"計算結果が有限の値になりません: {value}")
    return math.floor(value + 0.5)


def require_text(value: object, name: str) -> str:
    """文字列でなければInvalidArgumentErrorを送出する"""
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name}は文字列である必要があります: {type(value).__name__}")
    return value


def require_number(value: object, name: str) -> float:
    """実数でなければInvalidArgumentErrorを送出する（boolは受け付けない）"""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"{name}は数値である必要があります: {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name}は有限の値である必要があります: {value}")
    return float(value)


def count_weak_phrases(text: str) -> int:
    """
    テキスト中に含まれる弱い表現の種類数を数える

    同じ表現が何度出現しても1として数える

    Args:
        text: 小文字化済みのテキスト

    Returns:
        出現した弱い表現の種類数
    """
    return sum(1 for phrase in WEAK_PHRASES if phrase in text)


def split_words(text: str) -> List[str]:
    """空白文字の連続で分割し、空の単語を除く"""
    return [w for w in WHITESPACE.split(text) if w]


def split_sentences(transcript: str) -> List[str]:
    """句読点（. ! ?）で文に分割し、空白のみの断片を除く"""
    return [s for s in SENTENCE_DELIMITER.split(transcript) if WHITESPACE.sub("", s)]


def build_suggestions(
    word_count: int,
    filler_count: int,
    speaking_rate: int,
    weak_phrase_count: int,
    sentence_count: int,
) -> List[str]:
    """
    分析結果から改善提案を生成

    各チェックは独立に評価され、該当したものを評価順に並べる。
    どれにも該当しない場合は励ましのメッセージを1件だけ返す。
    """
    suggestions: List[str] = []

    if filler_count > word_count * FILLER_RATIO_LIMIT:
        suggestions.append(SUGGESTION_REDUCE_FILLERS)

    if speaking_rate < MIN_SPEAKING_RATE:
        suggestions.append(SUGGESTION_SPEAK_FASTER)
    elif speaking_rate > MAX_SPEAKING_RATE:
        suggestions.append(SUGGESTION_SPEAK_SLOWER)

    if weak_phrase_count > WEAK_PHRASE_LIMIT:
        suggestions.append(SUGGESTION_CONFIDENT_LANGUAGE)

    if sentence_count > 0 and word_count / sentence_count > MAX_AVERAGE_SENTENCE_LENGTH:
        suggestions.append(SUGGESTION_SHORTER_SENTENCES)

    if not suggestions:
        suggestions.append(SUGGESTION_GREAT_JOB)

    return suggestions


def analyze_speech(
    transcript: str,
    duration: float,
    confidence: float = 1,
) -> SpeechAnalysis:
    """
    発話テキストを分析して品質評価を返す

    副作用はなく、同じ引数に対して常に同じ結果を返す。

    Args:
        transcript: 音声認識のテキスト
        duration: 録音時間（秒）。0以下の場合、話速は0になる
        confidence: 音声認識の信頼度（0-1）。範囲外の値もそのまま換算する

    Returns:
        分析結果（SpeechAnalysisオブジェクト）

    Raises:
        InvalidArgumentError: 引数の型が不正な場合
    """
    require_text(transcript, "transcript")
    duration = require_number(duration, "duration")
    confidence = require_number(confidence, "confidence")

    lowered: str = transcript.lower()
    words: List[str] = split_words(lowered)
    word_count: int = len(words)

    # フィラーの検出（単語に部分文字列として含まれていれば一致とする）
    detected_fillers: List[str] = [
        filler for word in words for filler in FILLER_WORDS if filler in word
    ]
    filler_count: int = len(detected_fillers)

    # 話速（words per minute）
    speaking_rate: int = round_half_up(word_count / duration * 60) if duration > 0 else 0

    # 文の区切りからポーズ数を推定
    sentences: List[str] = split_sentences(transcript)
    pause_count: int = max(0, len(sentences) - 1)

    # 明瞭さスコア（フィラーが単語数を超える場合でも0未満にはしない）
    filler_ratio: float = filler_count / word_count if word_count > 0 else 0
    clarity: int = max(0, round_half_up((1 - filler_ratio) * 100))

    confidence_score: int = round_half_up(confidence * 100)

    suggestions: List[str] = build_suggestions(
        word_count=word_count,
        filler_count=filler_count,
        speaking_rate=speaking_rate,
        weak_phrase_count=count_weak_phrases(lowered),
        sentence_count=len(sentences),
    )

    logger.debug(
        "発話分析: words=%d fillers=%d rate=%d clarity=%d",
        word_count, filler_count, speaking_rate, clarity,
    )

    return SpeechAnalysis(
        word_count=word_count,
        filler_words=frozenset(detected_fillers),
        filler_count=filler_count,
        speaking_rate=speaking_rate,
        pause_count=pause_count,
        clarity=clarity,
        confidence=confidence_score,
        suggestions=tuple(suggestions),
    )
