# tests/core/config/test_hashing.py
"""
Testes do hashing canônico de values.

O hash deve ser SHA-256 do JSON canônico (chaves ordenadas, separadores
compactos, UTF-8) e, portanto, independente da ordem de inserção.
"""

import json
import hashlib

import pytest

from cilium_addon.core.config.hashing import compute_config_hash


def _canonical_json_bytes(obj: dict) -> bytes:
    s = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def test_hash_is_deterministic():
    a = {"tunnel": "disabled", "config": {"eni": {"enabled": True}, "ipam": {"mode": "eni"}}}
    b = {"config": {"ipam": {"mode": "eni"}, "eni": {"enabled": True}}, "tunnel": "disabled"}
    assert compute_config_hash(a) == compute_config_hash(b)


def test_hash_matches_canonical_sha256():
    cfg = {"hubble": {"ui": {"ingress": {"annotations": {"a/b": "ção"}}}}}
    expected = hashlib.sha256(_canonical_json_bytes(cfg)).hexdigest()
    out = compute_config_hash(cfg)
    assert out == expected
    assert len(out) == 64


def test_hash_changes_with_values():
    assert compute_config_hash({"tunnel": "disabled"}) != compute_config_hash({"tunnel": "vxlan"})


def test_hash_rejects_non_dict():
    with pytest.raises(TypeError):
        compute_config_hash(["not", "a", "dict"])
