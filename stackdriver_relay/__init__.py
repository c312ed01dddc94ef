"""Pacote do relay de incidentes Stackdriver -> Slack.

Este pacote contém:
- constants: variáveis de ambiente, cores/menções e a RelayConfig
- models: decodificação do alerta e estrutura da mensagem do Slack
- detection: regras de apresentação (cor e menção) por severidade/estado
- formatters: montagem e serialização da mensagem
- services: envio ao webhook do Slack
- controller: criação do Flask app e endpoints
"""
