from typing import TYPE_CHECKING, Optional

from .constants import UNKNOWN_RESOURCE

if TYPE_CHECKING:
    from .models import AzureAlert, MetricCondition


def resource_name_from_target_id(target_id: str) -> str:
    """
    Último segmento do ID de recurso do Azure.
    Ex.: /subscriptions/x/resourceGroups/y/providers/p/virtualMachines/z -> z
    Um ID sem '/' é devolvido inalterado.
    """
    return target_id.rsplit('/', 1)[-1]


def get_resource_name(alert: 'AzureAlert') -> str:
    target_ids = alert.data.essentials.alert_target_ids
    if not target_ids:
        return UNKNOWN_RESOURCE
    return resource_name_from_target_id(target_ids[0])


def get_primary_metric(alert: 'AzureAlert') -> Optional['MetricCondition']:
    # A primeira condição de allOf é o caso mais comum (alerta de métrica única)
    all_of = alert.data.alert_context.condition.all_of
    return all_of[0] if all_of else None
