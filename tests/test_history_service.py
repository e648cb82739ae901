"""
試行履歴のテスト
"""
from commskills.models.schemas import AttemptRecord, SpeechAnalysis
from commskills.services.history_service import push_attempt


def make_attempt(spoken: str) -> AttemptRecord:
    """テスト用の試行記録を作成"""
    return AttemptRecord(
        target="fluency",
        spoken=spoken,
        accuracy=100,
        confidence=90,
        analysis=SpeechAnalysis(word_count=1, suggestions=("Great job!",)),
    )


class TestPushAttempt:
    """push_attemptのテストクラス"""

    def test_push_to_empty(self):
        """空の履歴に追加"""
        attempt = make_attempt("fluency")
        assert push_attempt((), attempt) == (attempt,)

    def test_most_recent_first(self):
        """新しい試行が先頭になる"""
        first = make_attempt("first")
        second = make_attempt("second")

        history = push_attempt(push_attempt((), first), second)

        assert history == (second, first)

    def test_truncated_to_limit(self):
        """最大件数を超えた古い試行は捨てられる"""
        attempts = [make_attempt(f"attempt {i}") for i in range(7)]
        history: tuple = ()
        for attempt in attempts:
            history = push_attempt(history, attempt, limit=5)

        assert len(history) == 5
        assert history[0].spoken == "attempt 6"
        assert history[-1].spoken == "attempt 2"

    def test_original_not_modified(self):
        """元の履歴は変更されない"""
        original = [make_attempt("old")]
        history = push_attempt(original, make_attempt("new"))

        assert len(original) == 1
        assert len(history) == 2
        assert isinstance(history, tuple)

    def test_zero_limit(self):
        """最大件数が0なら空"""
        assert push_attempt((), make_attempt("x"), limit=0) == ()
