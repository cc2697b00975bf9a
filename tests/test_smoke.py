# tests/test_smoke.py
"""
Teste de sanidade estrutural (smoke test) do Cilium Add-on.

Garante apenas que o pacote é importável e expõe o namespace público.
Não valida comportamento de merge, overlay ou installer.
"""


def test_smoke():
    import cilium_addon

    assert set(cilium_addon.__all__) == {"CiliumAddOn", "CiliumAddOnProps", "deep_merge"}
