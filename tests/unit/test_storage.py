from __future__ import annotations

import json
from pathlib import Path

import pytest

from campaign_packager.clients import ArchiveStore


def test_put_get_and_delete(tmp_path: Path) -> None:
    store = ArchiveStore(tmp_path)
    path = store.put("campaigns/12_1700000000000.zip", b"PK\x05\x06", {"productName": "Double X"})

    assert path == (tmp_path / "campaigns" / "12_1700000000000.zip").resolve()
    sidecar = tmp_path / "campaigns" / "12_1700000000000.zip.meta.json"
    assert json.loads(sidecar.read_text(encoding="utf-8")) == {"productName": "Double X"}

    stored = store.get("campaigns/12_1700000000000.zip")
    assert stored is not None
    assert stored.data == b"PK\x05\x06"
    assert stored.metadata["productName"] == "Double X"

    store.delete("campaigns/12_1700000000000.zip")
    assert store.get("campaigns/12_1700000000000.zip") is None
    assert not sidecar.exists()


def test_missing_key_returns_none(tmp_path: Path) -> None:
    assert ArchiveStore(tmp_path).get("campaigns/nope.zip") is None


def test_keys_cannot_escape_root(tmp_path: Path) -> None:
    store = ArchiveStore(tmp_path / "root")
    with pytest.raises(ValueError):
        store.put("../outside.zip", b"x")
    with pytest.raises(ValueError):
        store.get("")
