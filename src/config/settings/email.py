"""Settings específicas de Email.

Configurações do provedor de envio (API HTTP ou relay SMTP) e da
identidade do operador do formulário.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Literal

from config.settings.base.core import parse_csv

MailBackend = Literal["http", "smtp", "memory"]
SmtpSecurity = Literal["starttls", "tls", "none"]

DEFAULT_MAIL_API_URL = "https://api.resend.com/emails"
DEFAULT_FROM_NAME = "Formulario de contacto"


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do canal Email.

    Attributes:
        backend: Implementação de envio (http|smtp|memory)
        api_url: Endpoint do provedor HTTP
        api_key: Chave do provedor HTTP
        smtp_host: Host do relay SMTP
        smtp_port: Porta do relay SMTP
        smtp_username: Usuário SMTP
        smtp_password: Senha SMTP
        smtp_security: starttls (587), tls implícito (465) ou none
        timeout_seconds: Timeout de envio imposto ao provedor
        operator_email: Caixa que recebe as notificações
        from_email: Endereço de origem (padrão: operator_email)
        from_name: Display name de origem
        social_links: Pares (rótulo, url) exibidos no email de confirmação
    """

    backend: MailBackend = "memory"

    # API HTTP
    api_url: str = DEFAULT_MAIL_API_URL
    api_key: str = ""

    # SMTP (envio)
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_security: SmtpSecurity = "starttls"

    timeout_seconds: float = 15.0

    # Identidade
    operator_email: str = ""
    from_email: str = ""
    from_name: str = DEFAULT_FROM_NAME
    social_links: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def sender_email(self) -> str:
        """Endereço efetivo de origem."""
        return self.from_email or self.operator_email

    def validate(self, is_development: bool = True) -> list[str]:
        """Valida configurações mínimas de Email."""
        errors: list[str] = []

        if self.backend not in ("http", "smtp", "memory"):
            errors.append(f"MAIL_BACKEND inválido: {self.backend}")

        if not self.operator_email:
            errors.append("CONTACT_OPERATOR_EMAIL não configurado")

        if self.timeout_seconds <= 0:
            errors.append("MAIL_TIMEOUT_SECONDS deve ser > 0")

        if self.backend == "http":
            if not self.api_key:
                errors.append("MAIL_API_KEY não configurado")
            if not self.api_url:
                errors.append("MAIL_API_URL não configurado")

        if self.backend == "smtp":
            if not self.smtp_host:
                errors.append("SMTP_HOST não configurado")
            if not self.smtp_username or not self.smtp_password:
                errors.append("SMTP_USERNAME/SMTP_PASSWORD não configurados")
            if self.smtp_security not in ("starttls", "tls", "none"):
                errors.append(f"SMTP_USE_TLS inválido: {self.smtp_security}")

        if self.backend == "memory" and not is_development:
            errors.append("MAIL_BACKEND=memory proibido em staging/production")

        return errors


def parse_social_links(raw: str) -> tuple[tuple[str, str], ...]:
    """Converte "GitHub=https://...,LinkedIn=https://..." em pares.

    Itens sem "=" usam a própria URL como rótulo.
    """
    links: list[tuple[str, str]] = []
    for item in parse_csv(raw):
        label, sep, url = item.partition("=")
        if not sep:
            links.append((item, item))
            continue
        if url.strip():
            links.append((label.strip() or url.strip(), url.strip()))
    return tuple(links)


def _parse_smtp_security(raw: str) -> SmtpSecurity:
    value = raw.lower()
    if value in ("tls", "ssl", "implicit"):
        return "tls"
    if value in ("none", "false", "0", "off"):
        return "none"
    return "starttls"


def _load_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    backend_str = os.getenv("MAIL_BACKEND", "memory").lower()
    backend: MailBackend = backend_str if backend_str in ("http", "smtp", "memory") else "memory"
    return EmailSettings(
        backend=backend,
        api_url=os.getenv("MAIL_API_URL", DEFAULT_MAIL_API_URL),
        api_key=os.getenv("MAIL_API_KEY", ""),
        smtp_host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
        smtp_port=int(os.getenv("SMTP_PORT", "587")),
        smtp_username=os.getenv("SMTP_USERNAME", os.getenv("EMAIL_USER", "")),
        smtp_password=os.getenv("SMTP_PASSWORD", os.getenv("EMAIL_PASS", "")),
        smtp_security=_parse_smtp_security(os.getenv("SMTP_USE_TLS", "starttls")),
        timeout_seconds=float(os.getenv("MAIL_TIMEOUT_SECONDS", "15")),
        operator_email=os.getenv("CONTACT_OPERATOR_EMAIL", os.getenv("EMAIL_USER", "")),
        from_email=os.getenv("CONTACT_FROM_EMAIL", ""),
        from_name=os.getenv("CONTACT_FROM_NAME", DEFAULT_FROM_NAME),
        social_links=parse_social_links(os.getenv("CONTACT_SOCIAL_LINKS", "")),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_from_env()
