"""테스트 공용 픽스처 (모킹 DB, API 클라이언트)"""
import pytest
from fastapi.testclient import TestClient

import main
from relink.chatbot.graph_manager import ChatBotManager
from relink.database import Database


@pytest.fixture(autouse=True)
def supabase_disabled(monkeypatch):
    """Supabase 없이 모킹 모드로 실행"""
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)


@pytest.fixture
def db():
    return Database()


@pytest.fixture
def make_client(monkeypatch, db):
    """LLM을 바꿔 끼운 API 클라이언트 생성"""

    def _make(chat_llm=None, suggestion_llm=None, response_delay=0):
        monkeypatch.setattr(main, "db", db)
        monkeypatch.setattr(
            main,
            "chatbot_manager",
            ChatBotManager(db, chat_llm=chat_llm, suggestion_llm=suggestion_llm, response_delay=response_delay),
        )
        return TestClient(main.app)

    return _make
