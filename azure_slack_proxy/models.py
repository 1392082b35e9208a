"""Modelos do Azure Monitor Common Alert Schema.

Referência: https://learn.microsoft.com/en-us/azure/azure-monitor/alerts/alerts-common-schema

Somente o subconjunto usado na mensagem do Slack é modelado. Campos
desconhecidos são ignorados; campos opcionais ausentes ficam como None.
"""
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, ValidationError

from .detection import get_condition_emoji, get_severity_emoji, is_resolved
from .enrichment import get_primary_metric, get_resource_name
from .exceptions import DecodeError


class _SchemaModel(BaseModel):
    # Só as chaves do schema (camelCase) são aceitas; NaN/Infinity não são JSON válido
    model_config = ConfigDict(frozen=True, extra='ignore', allow_inf_nan=False)


class Dimension(_SchemaModel):
    """Dimensão da métrica (ex.: StatusCode: 429)"""

    name: StrictStr
    value: StrictStr


class MetricCondition(_SchemaModel):
    metric_name: StrictStr = Field(alias='metricName')
    metric_namespace: Optional[StrictStr] = Field(None, alias='metricNamespace')
    operator: StrictStr
    # threshold é string no schema (pode conter expressões não numéricas)
    threshold: StrictStr
    metric_value: StrictFloat = Field(alias='metricValue')
    time_aggregation: Optional[StrictStr] = Field(None, alias='timeAggregation')
    dimensions: Optional[Tuple[Dimension, ...]] = None


class Condition(_SchemaModel):
    all_of: Tuple[MetricCondition, ...] = Field(alias='allOf')
    window_size: Optional[StrictStr] = Field(None, alias='windowSize')


class AlertContext(_SchemaModel):
    condition: Condition
    condition_type: Optional[StrictStr] = Field(None, alias='conditionType')


class Essentials(_SchemaModel):
    alert_id: StrictStr = Field(alias='alertId')
    alert_rule: StrictStr = Field(alias='alertRule')
    severity: StrictStr
    monitor_condition: StrictStr = Field(alias='monitorCondition')
    fired_date_time: StrictStr = Field(alias='firedDateTime')
    description: Optional[StrictStr] = None
    alert_target_ids: Tuple[StrictStr, ...] = Field(alias='alertTargetIDs')
    resolved_date_time: Optional[StrictStr] = Field(None, alias='resolvedDateTime')
    signal_type: Optional[StrictStr] = Field(None, alias='signalType')
    monitoring_service: Optional[StrictStr] = Field(None, alias='monitoringService')
    investigation_link: Optional[StrictStr] = Field(None, alias='investigationLink')


class AlertData(_SchemaModel):
    essentials: Essentials
    alert_context: AlertContext = Field(alias='alertContext')


class AzureAlert(_SchemaModel):
    """Raiz do payload enviado pelos Action Groups do Azure Monitor"""

    schema_id: StrictStr = Field(alias='schemaId')
    data: AlertData

    def get_resource_name(self) -> str:
        return get_resource_name(self)

    def get_severity_emoji(self) -> str:
        return get_severity_emoji(self)

    def get_condition_emoji(self) -> str:
        return get_condition_emoji(self)

    def is_resolved(self) -> bool:
        return is_resolved(self)

    def get_primary_metric(self) -> Optional[MetricCondition]:
        return get_primary_metric(self)


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        location = '.'.join(str(p) for p in error.get('loc', ()))
        message = error.get('msg', 'invalid value')
        parts.append(f"{location}: {message}" if location else message)
    return '; '.join(parts) or str(exc)


def decode_alert(body: Union[bytes, str]) -> AzureAlert:
    """
    Decodifica o corpo JSON recebido em um AzureAlert.
    Qualquer campo obrigatório ausente ou com tipo JSON errado invalida o payload inteiro.
    """
    try:
        return AzureAlert.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(_describe_validation_error(exc)) from exc
