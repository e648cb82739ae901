"""
発音練習の直近の試行履歴
"""
from typing import Iterable

from commskills.config import RECENT_ATTEMPTS_LIMIT
from commskills.models.schemas import AttemptRecord


def push_attempt(
    history: Iterable[AttemptRecord],
    attempt: AttemptRecord,
    limit: int = RECENT_ATTEMPTS_LIMIT,
) -> tuple[AttemptRecord, ...]:
    """
    試行を履歴の先頭に追加した新しい履歴を返す（元の履歴は変更しない）

    Args:
        history: 新しい順に並んだ既存の履歴
        attempt: 追加する試行
        limit: 保持する最大件数

    Returns:
        新しい順に並んだ、最大limit件の履歴
    """
    if limit <= 0:
        return ()
    return (attempt, *history)[:limit]
