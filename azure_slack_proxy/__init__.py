"""Pacote do proxy Azure Monitor -> Slack.

Este pacote contém:
- constants: variáveis de ambiente e mapas de emojis
- exceptions: erros por requisição e seus status HTTP
- models: Common Alert Schema (pydantic) e decodificação do payload
- enrichment: extração do nome do recurso e da métrica principal
- detection: emojis de severidade/condição e estado resolvido
- utils: helpers de formatação
- formatters: formatação da mensagem do Slack
- services: integração com o webhook do Slack
- controller: criação do Flask app e endpoints
"""
