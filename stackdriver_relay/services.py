import logging

import requests

logger = logging.getLogger(__name__)


def send_slack_payload(session, webhook_url, payload_json, timeout=None):
    """Envia a mensagem ao webhook do Slack como campo de formulário `payload`.

    Uma única tentativa; falhas de transporte (requests.RequestException)
    sobem para quem chamou. O status HTTP da resposta não é interpretado, o
    corpo é apenas registrado no log.
    """
    # com stream=True o corpo só é lido em resp.text, abaixo
    resp = session.post(webhook_url, data={'payload': payload_json}, timeout=timeout, stream=True)

    try:
        logger.info(f"[slack response] {resp.status_code} {resp.text}")
    except requests.RequestException as exc:
        logger.warning(f"Não foi possível ler a resposta do Slack: {exc}")
    finally:
        resp.close()
    return resp
