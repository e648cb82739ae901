"""
コマンドラインのテスト
"""
import pytest
from unittest.mock import patch
import main


class TestMain:
    """mainのテストクラス"""
    
    @pytest.fixture(autouse=True)
    def no_logging_setup(self):
        """テスト中はログファイルを作成しない"""
        with patch('main.setup_logging'):
            yield
    
    def test_analyze(self, capsys):
        """analyzeコマンド"""
        result = main.main(["analyze", "um like I think we should um go", "--duration", "10"])
        
        output = capsys.readouterr().out
        assert result == 0
        assert "Words: 8" in output
        assert "Speaking rate: 48 wpm" in output
        assert "Filler words: 3 (like, um)" in output
    
    def test_score(self, capsys):
        """scoreコマンド"""
        result = main.main(["score", "the quick fox", "the quick brown fox"])
        
        assert result == 0
        assert "Accuracy: 50% (needs_practice)" in capsys.readouterr().out
    
    def test_stats(self, capsys, tmp_path):
        """statsコマンド"""
        with patch('commskills.services.storage_service.SESSIONS_DIR', tmp_path):
            result = main.main(["stats", "--user", "user-1"])
        
        output = capsys.readouterr().out
        assert result == 0
        assert "Total sessions: 0" in output
        assert "Streak: 0 days" in output
    
    def test_missing_command(self):
        """コマンドを指定しない場合はエラー終了"""
        with pytest.raises(SystemExit):
            main.main([])
