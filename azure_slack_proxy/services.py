import logging

import requests

from .exceptions import ForwardRejected, ForwardTransportError

logger = logging.getLogger(__name__)


def build_slack_payload(text):
    return {"text": text}


def send_slack_payload(webhook_url, text, timeout=None):
    """
    Envia a mensagem ao webhook do Slack. Sem retentativas: qualquer falha
    vira exceção e é respondida ao chamador na mesma requisição.
    """
    try:
        resp = requests.post(
            webhook_url,
            json=build_slack_payload(text),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise ForwardTransportError(exc) from exc

    logger.debug("Slack response: %s", resp.status_code)
    if resp.status_code != 200:
        raise ForwardRejected(resp.status_code, resp.text)
    return resp
