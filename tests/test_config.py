import json

from DocSearch.config import DEFAULT_CONFIG, load_config, merge_config
from DocSearch.preprocessing.document import DocumentStatus
from DocSearch.search_server import SearchServer


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(str(tmp_path / "missing.json"))
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_partial_file_is_merged_over_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"stop_words": "in the", "search": {"max_result_document_count": 3}}))
    config = load_config(str(path))
    assert config["stop_words"] == "in the"
    assert config["search"]["max_result_document_count"] == 3
    assert config["search"]["relevance_epsilon"] == 1e-6


def test_broken_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert load_config(str(path)) == DEFAULT_CONFIG
    assert "Could not load config" in caplog.text


def test_merge_does_not_modify_inputs():
    override = {"search": {"relevance_epsilon": 0.1}}
    merged = merge_config(DEFAULT_CONFIG, override)
    assert merged["search"]["relevance_epsilon"] == 0.1
    assert DEFAULT_CONFIG["search"]["relevance_epsilon"] == 1e-6


def test_stop_words_from_config_and_argument():
    server = SearchServer(config={"stop_words": "in the"})
    assert server.stop_words == frozenset({"in", "the"})

    server = SearchServer(stop_words=["cat"], config={"stop_words": "in the"})
    assert server.stop_words == frozenset({"cat"})
    server.add_document(1, "cat in the city", DocumentStatus.ACTUAL, [])
    assert server.find_top_documents("cat") == []


def test_empty_config_does_not_read_config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"stop_words": "cat"}))
    monkeypatch.setattr("DocSearch.config.CONFIG_PATH", str(path))

    assert SearchServer().stop_words == frozenset({"cat"})
    assert SearchServer(config={}).stop_words == frozenset()
