"""API — camada de borda e adapters.

Responsabilidades:
- Receber o formulário de contato via HTTP
- Validar e limpar submissões
- Construir os emails enviados aos provedores
- Conversar com provedores de email (API HTTP ou SMTP)

Subpastas:
- connectors/: adapters de provedores de email
- normalizers/: sanitização de submissões
- payload_builders/: composição de emails
- validators/: regras de campo e limites
- routes/: endpoints HTTP (formulário, health)

NÃO PODE conter: FSM, estado entre requisições, orquestração de use cases.
"""
