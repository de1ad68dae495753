"""
API 测试
"""
import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.routes import set_dict_manager
from config import settings
from services.dictionary_manager import DictionaryManager


@pytest.fixture
def client():
    """使用项目自带词典启动服务"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def temp_dict_manager(client, tmp_path):
    """替换为临时词典，避免修改项目词典文件"""
    path = tmp_path / "thai.txt"
    path.write_text("ภาษา\nไทย\n", encoding="utf-8")
    dm = DictionaryManager(path, fallback_filename=str(tmp_path / "missing.txt"))
    dm.load_all()
    set_dict_manager(dm)
    return dm


class TestHealth:
    """健康检查测试"""
    
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"
    
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["dictionary_loaded"] is True
        assert data["dictionary_degraded"] is False


class TestTokenizeApi:
    """分词接口测试"""
    
    def test_tokenize(self, client):
        """测试单条分词"""
        response = client.post("/api/v1/tokenize", json={"text": "Hello  123<br>"})
        assert response.status_code == 200
        data = response.json()
        assert data["text"] == "Hello  123<br>"
        assert [(t["text"], t["type"]) for t in data["tokens"]] == [
            ("hello", "western"),
            ("  ", "space"),
            ("123", "number"),
            ("<br>", "tag"),
        ]
        assert data["words"] == ["hello", "123", "<br>"]
    
    def test_tokenize_thai(self, client):
        """测试泰文分词"""
        response = client.post("/api/v1/tokenize", json={"text": "กินข้าว ภาษาไทย"})
        assert response.status_code == 200
        assert response.json()["words"] == ["กิน", "ข้าว", "ภาษาไทย"]
    
    def test_tokenize_empty(self, client):
        """测试空文本被拒绝"""
        response = client.post("/api/v1/tokenize", json={"text": ""})
        assert response.status_code == 422
    
    def test_tokenize_batch(self, client):
        """测试批量分词"""
        response = client.post(
            "/api/v1/tokenize/batch",
            json={"texts": ["ภาษาไทย", "", "abc 1"]}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert [r["words"] for r in data["results"]] == [["ภาษาไทย"], [], ["abc", "1"]]
    
    def test_tokenize_batch_too_large(self, client):
        """测试批量超过上限"""
        texts = ["a"] * (settings.max_batch_size + 1)
        response = client.post("/api/v1/tokenize/batch", json={"texts": texts})
        assert response.status_code == 422


class TestDictionaryApi:
    """词典接口测试"""
    
    def test_stats(self, client, temp_dict_manager):
        response = client.get("/api/v1/dictionary/stats")
        assert response.status_code == 200
        data = response.json()
        assert data["words"] == 2
        assert data["degraded"] is False
    
    def test_lookup(self, client, temp_dict_manager):
        """测试三值查询"""
        def status(word):
            return client.get("/api/v1/dictionary/lookup", params={"word": word}).json()["status"]
        
        assert status("ภาษา") == "word"
        assert status("ภา") == "prefix"
        assert status("กิน") == "absent"
    
    def test_add_and_remove(self, client, temp_dict_manager):
        """测试添加、删除词条"""
        response = client.post("/api/v1/dictionary/add", json={"word": "ภาษาไทย"})
        assert response.json()["status"] == "success"
        
        response = client.post("/api/v1/tokenize", json={"text": "ภาษาไทย"})
        assert response.json()["words"] == ["ภาษาไทย"]
        
        response = client.post("/api/v1/dictionary/add", json={"word": "ภาษาไทย"})
        assert response.json()["status"] == "unchanged"
        
        response = client.delete("/api/v1/dictionary/remove", params={"word": "ภาษาไทย"})
        assert response.json()["status"] == "success"
        
        response = client.post("/api/v1/tokenize", json={"text": "ภาษาไทย"})
        assert response.json()["words"] == ["ภาษา", "ไทย"]
    
    def test_add_invalid_word(self, client, temp_dict_manager):
        """测试含空白或以 # 开头的词被拒绝"""
        for word in ["กิน\nข้าว", "#กิน"]:
            response = client.post("/api/v1/dictionary/add", json={"word": word})
            assert response.status_code == 422
        assert temp_dict_manager.get_stats()["words"] == 2
    
    def test_reload(self, client, temp_dict_manager):
        """测试重新加载"""
        temp_dict_manager.dictionary_path.write_text("กิน\n", encoding="utf-8")
        response = client.post("/api/v1/dictionary/reload")
        assert response.status_code == 200
        assert response.json()["words"] == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
