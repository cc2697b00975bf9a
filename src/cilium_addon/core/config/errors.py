# src/cilium_addon/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Cilium Add-on.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de arquivos de values, a validação estrutural de árvores
de configuração e a resolução das opções do add-on.

As exceções aqui definidas representam **violações estruturais
explícitas** da configuração, e não erros de instalação do chart.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha do Chart Installer

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do add-on nem do installer
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do add-on.

    Todas as exceções levantadas durante carregamento, validação estrutural
    e resolução de opções devem herdar desta classe.
    """


class ValuesFileNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de values informado explicitamente
    não existe no caminho especificado.

    Decisões arquiteturais:
        - Arquivos informados pelo usuário são obrigatórios
        - Não existe busca implícita em diretórios alternativos
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de uma configuração
    não é um mapa chave-valor.

    Listas ou valores escalares no root são inválidos tanto para arquivos
    de values quanto para a opção `values` do add-on.
    """


class InvalidConfigTreeError(ConfigError):
    """
    Exceção levantada quando uma estrutura não pertence ao domínio
    de ConfigTree.

    Exemplos:
        - chave que não é string
        - valor de tipo não suportado (ex.: objetos arbitrários, sets)
        - referência cíclica (um nó ancestral de si mesmo)

    Invariantes:
        - Nenhum merge parcial é produzido quando a árvore é inválida
    """


class UnknownOptionError(ConfigError):
    """
    Exceção levantada quando uma opção desconhecida é informada ao add-on.

    Decisões arquiteturais:
        - Opções são declaradas explicitamente em `CiliumAddOnProps`
        - Erros de digitação não são ignorados silenciosamente
    """
