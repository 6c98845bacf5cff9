"""Settings base do contact-relay.

Configurações comuns ao serviço HTTP.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_PORT = 5000


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        port: Porta HTTP de escuta
        cors_allowed_origins: Origens permitidas para CORS ("*" = todas)
    """

    # Ambiente
    environment: Environment = "development"
    service_name: str = "contact-relay"
    debug: bool = False

    # HTTP
    port: int = DEFAULT_PORT
    cors_allowed_origins: tuple[str, ...] = field(default=("*",))

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_staging(self) -> bool:
        """Retorna True se ambiente é staging."""
        return self.environment == "staging"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    @property
    def allows_any_origin(self) -> bool:
        return "*" in self.cors_allowed_origins

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not 0 < self.port < 65536:
            errors.append(f"PORT fora do intervalo válido: {self.port}")

        if not self.cors_allowed_origins:
            errors.append("CORS_ALLOWED_ORIGINS não pode ser vazio")
        elif self.allows_any_origin and self.is_production:
            errors.append("CORS_ALLOWED_ORIGINS=* proibido em production")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def parse_csv(raw: str) -> tuple[str, ...]:
    """Quebra lista separada por vírgulas, descartando itens vazios."""
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "contact-relay"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        cors_allowed_origins=parse_csv(os.getenv("CORS_ALLOWED_ORIGINS", "*")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
