"""App: coração do sistema (orquestração, casos de uso e infraestrutura).

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de entrada, entidades do gateway e Result
- use_cases/: casos de uso do checkout (sem IO direto)
- infra/: implementações concretas (store de dedupe)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
