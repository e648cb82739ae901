"""
セットアップ確認スクリプト
実行前に必要な依存関係がインストールされているか確認する
"""
import sys
from pathlib import Path

def check_imports() -> bool:
    """必要なモジュールのインポートを確認"""
    errors: list[str] = []
    
    # 外部ライブラリ
    try:
        from dotenv import load_dotenv
        print("✓ python-dotenv: OK")
    except ImportError:
        errors.append("python-dotenv がインストールされていません。pip install python-dotenv を実行してください。")
    
    try:
        from pydantic import BaseModel
        print("✓ pydantic: OK")
    except ImportError:
        errors.append("pydantic がインストールされていません。pip install pydantic を実行してください。")
    
    # アプリケーションモジュール
    try:
        sys.path.insert(0, str(Path(__file__).parent))
        from commskills.config import APP_DATA_DIR
        from commskills.models.schemas import SpeechAnalysis, SessionRecord
        from commskills.services.analysis_service import analyze_speech
        from commskills.services.practice_service import PracticeService
        print("✓ アプリケーションモジュール: OK")
    except ImportError as e:
        errors.append(f"アプリケーションモジュールのインポートエラー: {e}")
    
    if errors:
        print("\n❌ 以下の問題が見つかりました:")
        for error in errors:
            print(f"  - {error}")
        print("\n依存関係をインストールするには:")
        print("  pip install -e .")
        return False
    
    print("\n✓ 全ての依存関係が正しくインストールされています。")
    return True

def check_structure() -> bool:
    """プロジェクト構造を確認"""
    base_path = Path(__file__).parent
    required_files = [
        "main.py",
        "commskills/config.py",
        "commskills/exceptions.py",
        "commskills/models/schemas.py",
        "commskills/services/analysis_service.py",
        "commskills/services/accuracy_service.py",
        "commskills/services/streak_service.py",
        "commskills/services/history_service.py",
        "commskills/services/recognition_service.py",
        "commskills/services/storage_service.py",
        "commskills/services/practice_service.py",
        "commskills/services/content_service.py",
    ]
    
    missing_files: list[str] = []
    for file_path in required_files:
        if not (base_path / file_path).exists():
            missing_files.append(file_path)
    
    if missing_files:
        print("❌ 以下のファイルが見つかりません:")
        for file_path in missing_files:
            print(f"  - {file_path}")
        return False
    
    print("✓ プロジェクト構造: OK")
    return True

if __name__ == "__main__":
    print("=== セットアップ確認 ===\n")
    
    structure_ok = check_structure()
    print()
    imports_ok = check_imports()
    
    print("\n" + "=" * 40)
    if structure_ok and imports_ok:
        print("✓ セットアップは完了しています。")
        print("\n実行方法:")
        print('  python main.py analyze "your transcript" --duration 30')
        sys.exit(0)
    else:
        print("❌ セットアップに問題があります。")
        print("\n依存関係をインストールするには:")
        print("  pip install -e .")
        sys.exit(1)
