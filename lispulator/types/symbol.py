from __future__ import annotations


class Symbol:
    """An identifier. One instance exists per name, so `is` and `==` agree."""

    __slots__ = ("name",)
    __match_args__ = ("name",)

    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.name = name
            cls._table[name] = sym
        return sym

    def __reduce__(self):
        return Symbol, (self.name,)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


TRUE = Symbol("#t")
FALSE = Symbol("#f")
