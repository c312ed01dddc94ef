import logging

import requests
from flask import Flask, Response, request

from .constants import load_config
from .formatters import build_slack_message, serialize_message
from .models import decode_alert
from .services import send_slack_payload

logger = logging.getLogger(__name__)


def _internal_error():
    return Response(status=500)


def create_app(config=None, session=None):
    """Cria o Flask app. `config` e `session` podem ser injetados (testes);
    por padrão vêm do ambiente e do próprio módulo requests (um POST por chamada)."""
    app = Flask(__name__)
    config = config or load_config()
    session = session or requests

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'stackdriver-slack-relay'}, 200

    @app.route('/', methods=['POST'])
    @app.route('/alert', methods=['POST'])
    def alert():
        try:
            alert_data = decode_alert(request.get_data(as_text=True))
        except ValueError as e:
            logger.error(f"[ERROR] decode alert error, {e}.")
            return _internal_error()

        logger.info(f"[alert log] {alert_data}")

        message = build_slack_message(alert_data, config)
        try:
            payload_json = serialize_message(message)
        except (TypeError, ValueError) as e:
            logger.error(f"[ERROR] marshal error, {e}.")
            return _internal_error()

        try:
            send_slack_payload(session, config.webhook_url, payload_json, timeout=config.timeout)
        except requests.RequestException as e:
            logger.error(f"[ERROR] post form error, {e}.")
            return _internal_error()

        return Response(payload_json, status=200, content_type='application/json')

    return app
