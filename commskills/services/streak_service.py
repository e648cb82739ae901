"""
連続練習日数（ストリーク）の計算サービス

セッション記録のリストから毎回ゼロから計算する。結果は保存しない。
"""
import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from typing import Any, List

from commskills.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def to_calendar_date(value: Any) -> date:
    """
    セッション記録またはその日時を暦日に変換

    タイムゾーン付きの日時はUTCに変換してから日付を取り出す。
    タイムゾーンなしの日時はそのまま日付を取り出す。

    Args:
        value: date、datetime、ISO 8601形式の文字列、
               またはdate属性/キーを持つセッション記録

    Returns:
        暦日

    Raises:
        InvalidArgumentError: 日付を解決できない場合
    """
    if isinstance(value, Mapping):
        value = value.get("date")
    elif not isinstance(value, (date, str)) and hasattr(value, "date"):
        value = value.date

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as e:
            raise InvalidArgumentError(f"日付として解釈できません: {value!r}") from e

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value

    raise InvalidArgumentError(f"セッション記録から日付を取得できません: {value!r}")


def utc_today() -> date:
    """現在のUTCの日付"""
    return datetime.now(timezone.utc).date()


def distinct_dates_descending(sessions: Iterable[Any]) -> List[date]:
    """同じ日のセッションをまとめ、新しい日付から順に並べる"""
    return sorted({to_calendar_date(session) for session in sessions}, reverse=True)


def calculate_longest_streak(sessions: Iterable[Any], today: date | None = None) -> int:
    """
    履歴全体の中で最も長い連続練習日数を計算

    新しい日付から順に、直前の基準日との差が1日以内なら連続とみなす。
    最初の比較の基準日は最新セッションの日付ではなく今日なので、
    最新セッションが2日以上前だと最初の日付で連続が1から数え直しになる。
    結果は「今日まで続いている連続日数」ではなく「履歴中の最長の連続日数」になる。

    Args:
        sessions: セッション記録のリスト（順不同）
        today: 基準日（指定しない場合はUTCの今日）

    Returns:
        最長の連続日数。セッションがない場合は0
    """
    dates: List[date] = distinct_dates_descending(sessions)
    if not dates:
        return 0

    previous: date = today or utc_today()
    current_streak: int = 0
    longest_streak: int = 0

    for current in dates:
        if (previous - current).days <= 1:
            current_streak += 1
        else:
            current_streak = 1
        longest_streak = max(longest_streak, current_streak)
        previous = current

    logger.debug("最長ストリーク: %d日 (%d日分の記録)", longest_streak, len(dates))
    return longest_streak


def calculate_current_streak(sessions: Iterable[Any], today: date | None = None) -> int:
    """
    今日または昨日まで続いている連続練習日数を計算

    Args:
        sessions: セッション記録のリスト（順不同）
        today: 基準日（指定しない場合はUTCの今日）

    Returns:
        現在の連続日数。最新のセッションが2日以上前なら0
    """
    previous: date = today or utc_today()
    streak: int = 0

    for current in distinct_dates_descending(sessions):
        if (previous - current).days > 1:
            break
        streak += 1
        previous = current

    return streak
