"""Exceções do proxy. Cada uma carrega o status HTTP e a mensagem pública."""

from typing import Optional

from .constants import CONFIGURATION_FAILURE_MESSAGE, SLACK_FAILURE_MESSAGE


class RelayError(Exception):
    """Base para todos os erros tratados por requisição"""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationMissing(RelayError):
    """URL do webhook do Slack ausente"""

    def __init__(self, setting: str = "SLACK_WEBHOOK_URL") -> None:
        self.setting = setting
        super().__init__(CONFIGURATION_FAILURE_MESSAGE)


class DecodeError(RelayError):
    """Payload recebido não corresponde ao Common Alert Schema"""

    status_code = 400

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid alert payload: {reason}")


class ForwardTransportError(RelayError):
    """Falha de rede ao contatar o Slack. A causa não é exposta ao chamador."""

    def __init__(self, cause: Optional[Exception] = None) -> None:
        self.cause = cause
        super().__init__(SLACK_FAILURE_MESSAGE)


class ForwardRejected(RelayError):
    """Slack respondeu com status diferente de 200"""

    def __init__(self, upstream_status: int, upstream_body: str = "") -> None:
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body
        super().__init__(SLACK_FAILURE_MESSAGE)
