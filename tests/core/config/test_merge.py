# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de values.

Os testes asseguram que:
- valores escalares e listas do override substituem integralmente a base
- mapas são mesclados de forma recursiva
- conflitos de tipo são resolvidos pelo override, sem erro
- objetos de entrada não são mutados nem compartilhados com o resultado
- a ordem de chaves do resultado é determinística

Limites explícitos:
    - Não valida carregamento de arquivos YAML
    - Não valida o overlay do add-on
"""

import copy

import pytest

try:
    from cilium_addon.core.config.merge import deep_merge, merge_layers
    from cilium_addon.core.config.errors import (
        InvalidConfigRootTypeError,
        InvalidConfigTreeError,
    )
except Exception as e:  # noqa: BLE001
    deep_merge = None
    merge_layers = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o módulo de merge esteja disponível para os testes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config merge modules. Implement:\n"
            "- src/cilium_addon/core/config/merge.py (deep_merge, merge_layers)\n"
            f"Import error: {_IMPORT_ERR}"
        )


SAMPLE = {
    "config": {"eni": {"enabled": True}, "ipam": {"mode": "eni"}},
    "egressMasqueradeInterfaces": "eth0",
    "tags": ["a", "b"],
    "tunnel": "disabled",
}


def test_merge_identity_with_empty_override():
    _require_imports()
    out = deep_merge(SAMPLE, {})
    assert out == SAMPLE
    assert out is not SAMPLE
    assert out["config"] is not SAMPLE["config"]


def test_merge_identity_with_empty_base():
    _require_imports()
    out = deep_merge({}, SAMPLE)
    assert out == SAMPLE
    assert out["tags"] is not SAMPLE["tags"]


def test_merge_is_idempotent():
    _require_imports()
    assert deep_merge(SAMPLE, SAMPLE) == SAMPLE


def test_merge_simple_override():
    """
    Overrides escalares substituem o valor base; chaves não sobrescritas
    permanecem e nenhum input é mutado.
    """
    _require_imports()
    base = {"a": 1, "b": 2}
    override = {"b": 99}
    out = deep_merge(base, override)
    assert out == {"a": 1, "b": 99}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 99}


def test_merge_three_levels_keeps_base_siblings():
    """
    O merge aninhado é recursivo em todos os níveis: irmãos vindos da base
    sobrevivem ao lado das chaves sobrescritas pelo override.
    """
    _require_imports()
    base = {
        "hubble": {
            "ui": {
                "ingress": {"enabled": True, "className": "alb"},
                "replicas": 1,
            },
            "relay": {"enabled": False},
        }
    }
    override = {"hubble": {"ui": {"ingress": {"className": "nginx", "hosts": ["h"]}}}}
    out = deep_merge(base, override)
    assert out == {
        "hubble": {
            "ui": {
                "ingress": {"enabled": True, "className": "nginx", "hosts": ["h"]},
                "replicas": 1,
            },
            "relay": {"enabled": False},
        }
    }


def test_merge_list_override_total():
    _require_imports()
    base = {"egress": {"interfaces": ["eth0", "eth1"]}}
    override = {"egress": {"interfaces": ["eth2"]}}
    out = deep_merge(base, override)
    assert out == {"egress": {"interfaces": ["eth2"]}}


@pytest.mark.parametrize(
    "base_value, override_value",
    [
        ({"enabled": True}, "DEBUG"),
        ("disabled", {"mode": "vxlan"}),
        ({"a": 1}, [1, 2]),
        ([1, 2], None),
    ],
)
def test_merge_type_mismatch_override_wins(base_value, override_value):
    _require_imports()
    out = deep_merge({"k": base_value, "other": 1}, {"k": override_value})
    assert out == {"k": override_value, "other": 1}


def test_merge_does_not_mutate_or_alias_inputs():
    _require_imports()
    base = {"config": {"eni": {"enabled": True}}, "list": [{"x": 1}]}
    override = {"config": {"ipam": {"mode": "eni"}}, "extra": {"nested": [1, 2]}}
    base_snapshot = copy.deepcopy(base)
    override_snapshot = copy.deepcopy(override)

    out = deep_merge(base, override)
    assert base == base_snapshot
    assert override == override_snapshot

    out["extra"]["nested"].append(3)
    out["list"][0]["x"] = 42
    out["config"]["ipam"]["mode"] = "cluster-pool"
    assert base == base_snapshot
    assert override == override_snapshot


def test_merge_key_order_is_base_then_new_override_keys():
    _require_imports()
    base = {"b": 1, "a": {"y": 1, "x": 2}}
    override = {"z": 0, "a": {"w": 3, "x": 9}, "c": 1}
    out = deep_merge(base, override)
    assert list(out) == ["b", "a", "z", "c"]
    assert list(out["a"]) == ["y", "x", "w"]


def test_merge_end_to_end_scenario():
    _require_imports()
    base = {"config": {"eni": {"enabled": True}}, "tunnel": "disabled"}
    override = {"config": {"eni": {"enabled": False}}, "extra": "value"}
    assert deep_merge(base, override) == {
        "config": {"eni": {"enabled": False}},
        "tunnel": "disabled",
        "extra": "value",
    }


def test_merge_layers_last_wins():
    _require_imports()
    out = merge_layers({"a": 1, "n": {"x": 1}}, {"a": 2}, {"n": {"y": 2}})
    assert out == {"a": 2, "n": {"x": 1, "y": 2}}
    assert merge_layers() == {}


def test_merge_rejects_non_mapping_root():
    _require_imports()
    with pytest.raises(InvalidConfigRootTypeError):
        deep_merge({"a": 1}, ["not", "a", "map"])


def test_merge_rejects_cycles_and_foreign_values():
    _require_imports()
    cyclic = {"a": {}}
    cyclic["a"]["self"] = cyclic
    with pytest.raises(InvalidConfigTreeError):
        deep_merge({}, cyclic)
    with pytest.raises(InvalidConfigTreeError):
        deep_merge({"a": object()}, {})
    with pytest.raises(InvalidConfigTreeError):
        deep_merge({1: "int key"}, {})
