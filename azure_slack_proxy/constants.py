import os

# Configurações globais de ambiente
SLACK_WEBHOOK_URL = os.getenv("SLACK_WEBHOOK_URL")
AZURE_ALERTS_DASHBOARD_URL = os.getenv("AZURE_ALERTS_DASHBOARD_URL", "")
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Timeout do POST para o Slack (vazio = sem timeout, padrão do requests)
_slack_timeout_env = os.getenv("SLACK_TIMEOUT_SECONDS", "").strip()
SLACK_TIMEOUT_SECONDS = float(_slack_timeout_env) if _slack_timeout_env else None

SERVICE_NAME = "azure-slack-proxy"
COMMON_ALERT_SCHEMA_ID = "azureMonitorCommonAlertSchema"

UNKNOWN_RESOURCE = "Unknown"
SLACK_FAILURE_MESSAGE = "Failed to send to Slack"
CONFIGURATION_FAILURE_MESSAGE = "Slack webhook URL is not configured"
DASHBOARD_LINK_LABEL = "View in Azure"

# Emojis por severidade do Azure Monitor (Sev0 = mais crítico)
SEVERITY_EMOJIS = {
    "Sev0": "🔥",
    "Sev1": "🚨",
    "Sev2": "⚠️",
    "Sev3": "ℹ️",
    "Sev4": "📢",
}
DEFAULT_SEVERITY_EMOJI = SEVERITY_EMOJIS["Sev4"]

CONDITION_EMOJIS = {
    "Fired": "🔴",
    "Resolved": "✅",
}
DEFAULT_CONDITION_EMOJI = "🟡"

RESOLVED_CONDITION = "Resolved"
