import logging

from flask import Flask, current_app, request

from .constants import (
    AZURE_ALERTS_DASHBOARD_URL,
    SERVICE_NAME,
    SLACK_TIMEOUT_SECONDS,
    SLACK_WEBHOOK_URL,
)
from .exceptions import (
    ConfigurationMissing,
    DecodeError,
    ForwardRejected,
    ForwardTransportError,
    RelayError,
)
from .formatters import format_alert_message
from .models import decode_alert
from .services import send_slack_payload

logger = logging.getLogger(__name__)


def create_app(config=None):
    """
    Cria o app Flask. A configuração vem do ambiente (constants) e pode ser
    sobrescrita pelo dict `config` (usado nos testes).
    """
    app = Flask(__name__)
    app.config.update(
        SLACK_WEBHOOK_URL=SLACK_WEBHOOK_URL,
        AZURE_ALERTS_DASHBOARD_URL=AZURE_ALERTS_DASHBOARD_URL,
        SLACK_TIMEOUT_SECONDS=SLACK_TIMEOUT_SECONDS,
    )
    if config:
        app.config.update(config)

    register_error_handlers(app)

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': SERVICE_NAME}, 200

    @app.route('/', methods=['POST'])
    @app.route('/alert', methods=['POST'])
    def alert():
        webhook_url = current_app.config.get('SLACK_WEBHOOK_URL')
        if not webhook_url:
            raise ConfigurationMissing('SLACK_WEBHOOK_URL')

        body = request.get_data()
        logger.debug("Received data: %r", body[:2000])

        azure_alert = decode_alert(body)
        message = format_alert_message(
            azure_alert, current_app.config.get('AZURE_ALERTS_DASHBOARD_URL')
        )

        send_slack_payload(
            webhook_url,
            message,
            timeout=current_app.config.get('SLACK_TIMEOUT_SECONDS'),
        )
        logger.info(
            "Alerta '%s' (%s) enviado ao Slack",
            azure_alert.data.essentials.alert_rule,
            azure_alert.data.essentials.monitor_condition,
        )
        return '', 200

    return app


def register_error_handlers(app):
    # Cada erro fica restrito à requisição; o processo continua servindo

    @app.errorhandler(ConfigurationMissing)
    def handle_configuration_missing(exc):
        logger.error("Configuração ausente: %s", exc.setting)
        return exc.message, exc.status_code

    @app.errorhandler(DecodeError)
    def handle_decode_error(exc):
        logger.warning("Failed to parse Azure alert: %s", exc.reason)
        return exc.message, exc.status_code

    @app.errorhandler(ForwardTransportError)
    def handle_transport_error(exc):
        logger.error("Falha de rede ao enviar para o Slack: %s", exc.cause)
        return exc.message, exc.status_code

    @app.errorhandler(ForwardRejected)
    def handle_forward_rejected(exc):
        logger.error(
            "Slack recusou a mensagem: status=%s body=%s",
            exc.upstream_status,
            exc.upstream_body[:500],
        )
        return exc.message, exc.status_code

    @app.errorhandler(RelayError)
    def handle_relay_error(exc):
        logger.error("Erro ao processar alerta: %s", exc)
        return exc.message, exc.status_code
