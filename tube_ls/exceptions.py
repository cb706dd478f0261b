"""Exceções do tube-ls."""

from typing import Optional


class TubeLsError(Exception):
    """Erro base; tratado apenas no ponto de entrada da CLI."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class CredentialError(TubeLsError):
    """Nenhuma chave da API foi encontrada."""


class FetchError(TubeLsError):
    """Falha de rede ou status HTTP de erro ao consultar a API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause)
        self.status_code = status_code


class DecodeError(TubeLsError):
    """Resposta da API não é JSON ou não tem o formato esperado."""
