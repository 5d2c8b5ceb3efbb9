import sys

from docker_entrypoint import streamlit_args


def test_defaults(monkeypatch):
    monkeypatch.delenv("STREAMLIT_SERVER_PORT", raising=False)
    monkeypatch.delenv("STREAMLIT_SERVER_ADDRESS", raising=False)
    args = streamlit_args()
    assert args[:4] == [sys.executable, "-m", "streamlit", "run"]
    assert args[4].endswith("app.py")
    assert args[5:] == ["--server.port", "8501", "--server.address", "0.0.0.0"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("STREAMLIT_SERVER_PORT", "9000")
    monkeypatch.setenv("STREAMLIT_SERVER_ADDRESS", "127.0.0.1")
    args = streamlit_args()
    assert args[-4:] == ["--server.port", "9000", "--server.address", "127.0.0.1"]
