# tests/test_config.py
import pytest
from transcript_summarizer.config import SummarizerConfig, load_or_default, write_default_config

def test_defaults():
    cfg = SummarizerConfig()
    assert cfg.port == 9000
    assert cfg.endpoint == "http://127.0.0.1:9000/api/summarize"
    assert cfg.cors_origins == ["*"]

def test_dump_and_load(tmp_path):
    cfg = SummarizerConfig(port=9100, timeout_s=2.5, default_style="action", cors_origins=["http://localhost:8000"])
    path = tmp_path / "summarizer.json"
    path.write_text(cfg.dump())
    assert SummarizerConfig.load(path) == cfg
    assert SummarizerConfig.load_json_str(cfg.dump()) == cfg

def test_partial_config_uses_defaults():
    cfg = SummarizerConfig.load_json_str('{"port": "9200"}')
    assert cfg.port == 9200
    assert cfg.default_length == "medium"

def test_write_default_config_refuses_overwrite(tmp_path):
    path = tmp_path / "summarizer.json"
    write_default_config(path)
    assert SummarizerConfig.load(path) == SummarizerConfig()
    with pytest.raises(FileExistsError):
        write_default_config(path)

def test_load_or_default_missing_file(tmp_path):
    assert load_or_default(tmp_path / "missing.json") == SummarizerConfig()
