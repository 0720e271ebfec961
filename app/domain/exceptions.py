from __future__ import annotations


class DomainError(Exception):
    """Base para erros de dominio."""


class InvalidScenarioInputError(DomainError):
    """Parametros invalidos para simulacao de cenario."""


class InvalidPriceContextError(DomainError):
    """Preco de referencia do token de recompensa invalido."""
