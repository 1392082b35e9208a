from typing import TYPE_CHECKING

from .constants import (
    CONDITION_EMOJIS,
    DEFAULT_CONDITION_EMOJI,
    DEFAULT_SEVERITY_EMOJI,
    RESOLVED_CONDITION,
    SEVERITY_EMOJIS,
)

if TYPE_CHECKING:
    from .models import AzureAlert


def severity_emoji_for(severity: str) -> str:
    # Severidades novas/desconhecidas caem no mesmo emoji do Sev4
    return SEVERITY_EMOJIS.get(severity, DEFAULT_SEVERITY_EMOJI)


def condition_emoji_for(monitor_condition: str) -> str:
    return CONDITION_EMOJIS.get(monitor_condition, DEFAULT_CONDITION_EMOJI)


def get_severity_emoji(alert: 'AzureAlert') -> str:
    return severity_emoji_for(alert.data.essentials.severity)


def get_condition_emoji(alert: 'AzureAlert') -> str:
    return condition_emoji_for(alert.data.essentials.monitor_condition)


def is_resolved(alert: 'AzureAlert') -> bool:
    return alert.data.essentials.monitor_condition == RESOLVED_CONDITION
