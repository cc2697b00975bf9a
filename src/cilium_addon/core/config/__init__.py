# src/cilium_addon/core/config/__init__.py

"""
Camada de configuração do Cilium Add-on.

Este pacote contém os utilitários responsáveis por carregar arquivos de
values, combinar camadas de configuração via deep-merge determinístico
e identificar a configuração efetiva por hash.

Responsabilidades do pacote:
    - Carregamento de arquivos de values (YAML ou JSON)
    - Resolução da configuração final via deep-merge (override vence)
    - Geração de hash canônico para rastreabilidade da release

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - A mesma entrada sempre produz a mesma configuração final
    - Nenhum input é mutado

Limites explícitos:
    - Não valida schema do chart
    - Não instala nada no cluster
"""
