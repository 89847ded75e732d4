"""API: camada de borda (formulário de checkout e gateway de pagamento).

Responsabilidades:
- Receber o formulário de checkout (HTTP)
- Validar campos (checksums de CPF/CNPJ e cartão, validade, contato)
- Formatar dados para exibição
- Construir payloads e chamar o gateway Asaas

Subpastas:
- connectors/: clientes HTTP de APIs externas (Asaas)
- normalizers/: máscaras de exibição
- payload_builders/: corpos de requisição para o gateway
- validators/: regras de campo e mensagens
- routes/: endpoints HTTP (checkout, health)

NÃO PODE conter: orquestração de casos de uso.
"""
