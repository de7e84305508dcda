"""Unit tests for the ClientConfigStore."""

import json

from tars_client.infrastructure.storage import ClientConfigStore


def test_missing_file_leaves_client_id_unset(tmp_path):
    store = ClientConfigStore(tmp_path / "client-config.json")
    assert store.client_id is None


def test_corrupt_file_is_ignored(tmp_path, caplog):
    path = tmp_path / "client-config.json"
    path.write_text("{not json")

    store = ClientConfigStore(path)

    assert store.client_id is None
    assert "Could not load client ID" in caplog.text


def test_save_writes_pretty_json_and_reloads(tmp_path):
    path = tmp_path / "nested" / "client-config.json"
    store = ClientConfigStore(path)

    store.save(17)

    assert path.read_text() == '{\n  "clientId": 17\n}\n'
    assert ClientConfigStore(path).client_id == 17
    assert list(path.parent.glob("*.tmp")) == []


def test_empty_client_id_reads_as_unset(tmp_path):
    path = tmp_path / "client-config.json"
    path.write_text(json.dumps({"clientId": ""}))

    assert ClientConfigStore(path).client_id is None
