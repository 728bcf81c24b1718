# person_api/core/errors.py
"""
Tipos de erro e de resultado usados entre a camada de armazenamento e as rotas.

As operações do store não levantam exceções para falhas esperadas: devolvem
``Ok(valor)`` ou ``Err(PersonError)``. O conjunto de tipos de erro é fechado
(``ErrorKind``) e cada tipo tem um status HTTP fixo.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "validation_error"
    MALFORMED_REFERENCE = "malformed_reference"
    NOT_FOUND = "not_found"
    STORAGE = "storage_error"


HTTP_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.MALFORMED_REFERENCE: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE: 500,
}


@dataclass(frozen=True)
class PersonError:
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]

    @classmethod
    def not_found(cls) -> "PersonError":
        return cls(ErrorKind.NOT_FOUND, "Person not found")

    @classmethod
    def malformed_id(cls, value: str) -> "PersonError":
        return cls(ErrorKind.MALFORMED_REFERENCE, f"Invalid person id: {value!r}")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: PersonError


Result = Union[Ok[T], Err]


class StorageConfigurationError(RuntimeError):
    """Configuração obrigatória do banco ausente (ex.: MONGO_URI)."""


class StorageUnavailableError(RuntimeError):
    """Não foi possível estabelecer a conexão inicial com o banco."""
