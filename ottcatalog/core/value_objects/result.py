"""
Type resultat interne {ok, value} | {ok: False, reason}.

Les composants l'utilisent en interne pour distinguer "vide legitime" de
"echec amont" dans les logs. Il est converti en valeur vide ou None a la
frontiere du composant et n'atteint jamais la reponse HTTP.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Resultat d'une operation pouvant echouer sans lever d'exception.

    Attributs:
        ok: True si l'operation a reussi
        value: Valeur produite (None en cas d'echec)
        reason: Raison de l'echec (vide en cas de succes)
    """

    ok: bool
    value: Optional[T] = None
    reason: str = ""

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        """Construit un resultat en succes."""
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> "Result[T]":
        """Construit un resultat en echec avec sa raison."""
        return cls(ok=False, reason=reason)

    def unwrap_or(self, default: T) -> T:
        """Retourne la valeur en cas de succes, sinon la valeur par defaut."""
        if self.ok and self.value is not None:
            return self.value
        return default
