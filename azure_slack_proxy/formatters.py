from typing import TYPE_CHECKING, Optional

from .constants import DASHBOARD_LINK_LABEL
from .detection import get_condition_emoji, get_severity_emoji
from .enrichment import get_primary_metric, get_resource_name
from .utils import format_metric_value

if TYPE_CHECKING:
    from .models import AzureAlert, MetricCondition


def format_metric_lines(metric: 'MetricCondition'):
    lines = [
        f"> *Metric:* {metric.metric_name} {metric.operator} {metric.threshold} "
        f"(Current: {format_metric_value(metric.metric_value)})"
    ]
    # Dimensões (ex.: StatusCode: 429), na ordem recebida
    for dimension in metric.dimensions or ():
        lines.append(f"> *{dimension.name}:* {dimension.value}")
    return lines


def format_alert_message(alert: 'AzureAlert', dashboard_url: Optional[str] = None) -> str:
    """
    Monta o texto (mrkdwn do Slack) do alerta. Função pura: mesmo alerta e
    mesma URL de dashboard geram exatamente o mesmo texto.
    """
    essentials = alert.data.essentials

    parts = [f"{get_severity_emoji(alert)} {get_condition_emoji(alert)} *{essentials.alert_rule}*"]

    if essentials.description is not None:
        parts.append(f"> *Description:* {essentials.description}")

    parts.append(f"> *Resource:* {get_resource_name(alert)}")
    parts.append(f"> *Severity:* {essentials.severity}")
    parts.append(f"> *Time:* {essentials.fired_date_time}")

    metric = get_primary_metric(alert)
    if metric is not None:
        parts.extend(format_metric_lines(metric))

    if dashboard_url:
        parts.append(f"> <{dashboard_url}|{DASHBOARD_LINK_LABEL}>")

    return "".join(f"{line}\n" for line in parts)
