"""App — coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (processamento da submissão, envio)
- infra/: implementações concretas de IO (sender em memória)
- protocols/: contratos/interfaces e modelos de domínio
- observability/: correlation_id para logs estruturados
- constants/: textos e códigos do formulário

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""
