"""Implementações locais de envio de email."""

from app.infra.mail.memory_sender import MemoryMailSender

__all__ = ["MemoryMailSender"]
