"""Payloads de exemplo compartilhados pelos testes."""

import copy
import json

# Exemplo da documentação:
# https://learn.microsoft.com/en-us/azure/azure-monitor/alerts/alerts-common-schema#sample-alert-payload
SAMPLE_ALERT = {
    "schemaId": "azureMonitorCommonAlertSchema",
    "data": {
        "essentials": {
            "alertId": "/subscriptions/<subscription ID>/providers/Microsoft.AlertsManagement/alerts/aaaa0a0a-bb1b-cc2c-dd3d-eeeeee4e4e4e",
            "alertRule": "WCUS-R2-Gen2",
            "severity": "Sev2",
            "signalType": "Metric",
            "monitorCondition": "Fired",
            "monitoringService": "Platform",
            "alertTargetIDs": [
                "/subscriptions/<subscription ID>/resourcegroups/pipelinealertrg/providers/microsoft.compute/virtualmachines/wcus-r2-gen2"
            ],
            "configurationItems": ["wcus-r2-gen2"],
            "originAlertId": "3f2d4487-b0fc-4125-8bd5-7ad17384221e_PipeLineAlertRG_microsoft.insights_metricAlerts_WCUS-R2-Gen2_-117781227",
            "firedDateTime": "2019-03-22T13:58:24.3713213Z",
            "resolvedDateTime": "2019-03-22T14:03:16.2246313Z",
            "description": "Too many requests",
            "essentialsVersion": "1.0",
            "alertContextVersion": "1.0",
        },
        "alertContext": {
            "properties": None,
            "conditionType": "SingleResourceMultipleMetricCriteria",
            "condition": {
                "windowSize": "PT5M",
                "allOf": [
                    {
                        "metricName": "Percentage CPU",
                        "metricNamespace": "Microsoft.Compute/virtualMachines",
                        "operator": "GreaterThan",
                        "threshold": "25",
                        "timeAggregation": "Average",
                        "dimensions": [
                            {
                                "name": "ResourceId",
                                "value": "3efad9dc-3d50-4eac-9c87-8b3fd6f97e4e",
                            }
                        ],
                        "metricValue": 7.727,
                    }
                ],
            },
        },
        "customProperties": {"Key1": "Value1", "Key2": "Value2"},
    },
}

SAMPLE_MESSAGE = (
    "⚠️ \U0001f534 *WCUS-R2-Gen2*\n"
    "> *Description:* Too many requests\n"
    "> *Resource:* wcus-r2-gen2\n"
    "> *Severity:* Sev2\n"
    "> *Time:* 2019-03-22T13:58:24.3713213Z\n"
    "> *Metric:* Percentage CPU GreaterThan 25 (Current: 7.727)\n"
    "> *ResourceId:* 3efad9dc-3d50-4eac-9c87-8b3fd6f97e4e\n"
)


def sample_payload():
    return copy.deepcopy(SAMPLE_ALERT)


def sample_body(payload=None):
    return json.dumps(payload if payload is not None else SAMPLE_ALERT).encode('utf-8')
