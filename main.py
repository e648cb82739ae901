"""
コミュニケーション練習アプリ - メインエントリーポイント
発話テキストの分析、発音の一致度評価、練習記録の集計をコマンドラインから実行する
"""
import argparse
import sys
from pathlib import Path
from typing import List

# 環境変数の読み込み
from dotenv import load_dotenv

# .envファイルの読み込み（実行ファイルのディレクトリまたはカレントディレクトリから）
if getattr(sys, 'frozen', False):
    # PyInstallerでビルドされた場合
    application_path = Path(sys.executable).parent
else:
    # 開発環境の場合
    application_path = Path(__file__).parent

env_path = application_path / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    load_dotenv()

# 設定は環境変数を読むため、.envの読み込み後にインポートする
from commskills.config import setup_logging  # noqa: E402
from commskills.services.accuracy_service import accuracy_level, calculate_accuracy  # noqa: E402
from commskills.services.analysis_service import analyze_speech  # noqa: E402
from commskills.services.practice_service import PracticeService  # noqa: E402
from commskills.services.storage_service import LocalSessionStore  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    """コマンドライン引数のパーサーを作成"""
    parser = argparse.ArgumentParser(description="Communication skills practice toolkit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a spoken transcript")
    analyze_parser.add_argument("transcript", help="Transcript text")
    analyze_parser.add_argument("--duration", type=float, required=True, help="Duration in seconds")
    analyze_parser.add_argument("--confidence", type=float, default=1.0, help="Recognizer confidence (0-1)")

    score_parser = subparsers.add_parser("score", help="Score a spoken attempt against a target")
    score_parser.add_argument("spoken", help="Spoken transcript")
    score_parser.add_argument("target", help="Target word or sentence")

    stats_parser = subparsers.add_parser("stats", help="Show practice statistics")
    stats_parser.add_argument("--user", required=True, help="User id")

    return parser


def main(argv: List[str] | None = None) -> int:
    """アプリケーションの起動"""
    args = build_parser().parse_args(argv)
    setup_logging()

    if args.command == "analyze":
        analysis = analyze_speech(args.transcript, args.duration, args.confidence)
        print(f"Words: {analysis.word_count}")
        print(f"Filler words: {analysis.filler_count} ({', '.join(sorted(analysis.filler_words)) or '-'})")
        print(f"Speaking rate: {analysis.speaking_rate} wpm")
        print(f"Pauses: {analysis.pause_count}")
        print(f"Clarity: {analysis.clarity}")
        print(f"Confidence: {analysis.confidence}")
        for suggestion in analysis.suggestions:
            print(f"- {suggestion}")
    elif args.command == "score":
        accuracy = calculate_accuracy(args.spoken, args.target)
        print(f"Accuracy: {accuracy}% ({accuracy_level(accuracy)})")
    elif args.command == "stats":
        service = PracticeService(LocalSessionStore(), user_id=args.user)
        service.refresh()
        stats = service.dashboard_stats()
        print(f"Total sessions: {stats.total_sessions}")
        print(f"Practice time: {stats.total_duration_minutes} min")
        print(f"Average confidence: {stats.average_confidence}%")
        print(f"Streak: {stats.streak} days")

    return 0


if __name__ == "__main__":
    sys.exit(main())
