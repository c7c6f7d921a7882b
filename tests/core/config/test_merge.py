# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Os testes asseguram que:
- valores escalares são sobrescritos corretamente
- dicionários são mesclados de forma recursiva
- listas são sobrescritas integralmente
- `None` é aceito em qualquer direção
- conflitos de tipo são detectados e rejeitados explicitamente
- objetos de entrada não são mutados durante o merge
"""

import pytest

try:
    from admin_dto.core.config.merge import deep_merge
    from admin_dto.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    ConfigTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que os módulos de merge de config estejam disponíveis para os testes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config merge modules. Implement:\n"
            "- src/admin_dto/core/config/merge.py (deep_merge)\n"
            "- src/admin_dto/core/config/errors.py (ConfigTypeConflictError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    _require_imports()
    base = {"a": 1, "b": 2}
    override = {"b": 99}

    out = deep_merge(base, override)

    assert out == {"a": 1, "b": 99}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 99}


def test_merge_nested_views():
    """Verifica merge recursivo até o nível de view."""
    _require_imports()
    base = {"entities": {"Product": {"new": {"dto_class": "a.New", "dto_factory": None}}}}
    override = {"entities": {"Product": {"edit": {"dto_class": "a.Edit"}}}}

    out = deep_merge(base, override)

    assert out["entities"]["Product"]["new"] == {"dto_class": "a.New", "dto_factory": None}
    assert out["entities"]["Product"]["edit"] == {"dto_class": "a.Edit"}


def test_merge_list_override_total():
    _require_imports()
    base = {"entities": {"Product": {"new": {"fields": ["name", "price"]}}}}
    override = {"entities": {"Product": {"new": {"fields": ["name"]}}}}

    out = deep_merge(base, override)

    assert out["entities"]["Product"]["new"]["fields"] == ["name"]


def test_merge_none_is_type_neutral():
    """Verifica que `dto_factory` pode alternar entre None e string."""
    _require_imports()
    assert deep_merge({"dto_factory": None}, {"dto_factory": "create"}) == {"dto_factory": "create"}
    assert deep_merge({"dto_factory": "create"}, {"dto_factory": None}) == {"dto_factory": None}


def test_merge_type_conflict_raises():
    _require_imports()
    base = {"entities": {"Product": {"new": {}}}}
    override = {"entities": {"Product": "disabled"}}  # dict vs str

    with pytest.raises(ConfigTypeConflictError):
        deep_merge(base, override)


def test_merge_keeps_callables_by_reference():
    """Verifica que folhas não estruturais (classes, métodos ligados) não são copiadas."""
    _require_imports()

    class Service:
        def factory(self, data=None):
            return data

    service = Service()
    out = deep_merge(
        {"new": {"dto_class": Service, "dto_factory": None}},
        {"new": {"dto_factory": service.factory}},
    )

    assert out["new"]["dto_class"] is Service
    assert out["new"]["dto_factory"].__self__ is service


def test_merge_accepts_string_and_callable_references():
    """Verifica que strings de import e callables são intercambiáveis."""
    _require_imports()

    def build(data=None):
        return data

    assert deep_merge({"dto_factory": "create"}, {"dto_factory": build}) == {"dto_factory": build}
    assert deep_merge({"dto_factory": build}, {"dto_factory": "a.b::c"}) == {"dto_factory": "a.b::c"}


def test_copy_structure_copies_containers_only():
    _require_imports()
    from admin_dto.core.config.merge import copy_structure

    leaf = object()
    original = {"views": [{"leaf": leaf}]}

    copied = copy_structure(original)

    assert copied == original
    assert copied["views"] is not original["views"]
    assert copied["views"][0] is not original["views"][0]
    assert copied["views"][0]["leaf"] is leaf
