"""
LocalSessionStoreのテスト
"""
import pytest
import json
import tempfile
import shutil
from datetime import datetime
from pathlib import Path
from unittest.mock import patch
from commskills.models.schemas import SessionRecord
from commskills.services.storage_service import LocalSessionStore


class TestLocalSessionStore:
    """LocalSessionStoreのテストクラス"""
    
    @pytest.fixture
    def temp_data_dir(self):
        """一時的なデータディレクトリを作成"""
        temp_dir = Path(tempfile.mkdtemp())
        yield temp_dir
        shutil.rmtree(temp_dir)
    
    @pytest.fixture
    def store(self, temp_data_dir):
        """LocalSessionStoreのインスタンスを作成"""
        return LocalSessionStore(temp_data_dir / "sessions")
    
    def test_init(self, store):
        """初期化テスト"""
        assert store.data_dir.exists()
        assert store.data_dir.is_dir()
    
    def test_init_default_dir(self, temp_data_dir):
        """保存先を指定しない場合はSESSIONS_DIRを使用"""
        with patch('commskills.services.storage_service.SESSIONS_DIR', temp_data_dir / "default"):
            store = LocalSessionStore()
        
        assert store.data_dir == temp_data_dir / "default"
        assert store.data_dir.exists()
    
    def test_save_session(self, store):
        """セッション記録の保存"""
        record = SessionRecord(user_id="user-1", session_type="conversation", word_count=42)
        
        result = store.save_session(record)
        
        assert result is True
        json_files = list(store.data_dir.glob("session_*.json"))
        assert len(json_files) == 1
        with open(json_files[0], 'r', encoding='utf-8') as f:
            saved = json.load(f)
        assert saved["user_id"] == "user-1"
        assert saved["word_count"] == 42
    
    def test_save_same_timestamp_twice(self, store):
        """同じ日時の記録も別ファイルとして保存される"""
        date = datetime(2024, 3, 10, 9, 0)
        store.save_session(SessionRecord(user_id="user-1", date=date))
        store.save_session(SessionRecord(user_id="user-1", date=date))
        
        assert len(store.list_sessions()) == 2
    
    def test_save_session_failure(self, store):
        """保存失敗時のテスト"""
        with patch('builtins.open', side_effect=PermissionError("Permission denied")):
            result = store.save_session(SessionRecord(user_id="user-1"))
            assert result is False
    
    def test_list_sessions_most_recent_first(self, store):
        """セッション一覧は新しい順"""
        store.save_session(SessionRecord(user_id="user-1", date=datetime(2024, 3, 8, 9, 0)))
        store.save_session(SessionRecord(user_id="user-1", date=datetime(2024, 3, 10, 9, 0)))
        store.save_session(SessionRecord(user_id="user-1", date=datetime(2024, 3, 9, 9, 0)))
        
        sessions = store.list_sessions()
        
        assert [s.date.day for s in sessions] == [10, 9, 8]
    
    def test_list_sessions_filtered_by_user(self, store):
        """ユーザーIDで絞り込む"""
        store.save_session(SessionRecord(user_id="user-1"))
        store.save_session(SessionRecord(user_id="user-2"))
        
        sessions = store.list_sessions("user-1")
        
        assert len(sessions) == 1
        assert sessions[0].user_id == "user-1"
    
    def test_list_sessions_empty(self, store):
        """記録がない場合は空リスト"""
        assert store.list_sessions() == []
    
    def test_list_sessions_skips_broken_files(self, store):
        """読み込めないファイルはスキップする"""
        store.save_session(SessionRecord(user_id="user-1"))
        (store.data_dir / "session_broken.json").write_text("{not json", encoding="utf-8")
        (store.data_dir / "session_invalid.json").write_text('{"word_count": "many"}', encoding="utf-8")
        
        sessions = store.list_sessions()
        
        assert len(sessions) == 1
    
    def test_extra_fields_preserved(self, store):
        """外部で追加された項目も保持される"""
        payload = {"user_id": "user-1", "date": "2024-03-10T09:00:00", "mood": "good"}
        (store.data_dir / "session_external.json").write_text(json.dumps(payload), encoding="utf-8")
        
        record = store.load_session("session_external.json")
        
        assert record is not None
        assert record.model_extra == {"mood": "good"}
    
    def test_load_session_not_found(self, store):
        """存在しないファイルの読み込みテスト"""
        assert store.load_session("nonexistent.json") is None
    
    def test_delete_sessions_for_user(self, store):
        """特定のユーザーの記録のみ削除"""
        store.save_session(SessionRecord(user_id="user-1"))
        store.save_session(SessionRecord(user_id="user-2"))
        
        result = store.delete_sessions("user-1")
        
        assert result is True
        assert store.list_sessions("user-1") == []
        assert len(store.list_sessions("user-2")) == 1
    
    def test_delete_all_sessions(self, store):
        """すべての記録を削除"""
        store.save_session(SessionRecord(user_id="user-1"))
        store.save_session(SessionRecord(user_id="user-2"))
        
        result = store.delete_sessions()
        
        assert result is True
        assert store.list_sessions() == []
