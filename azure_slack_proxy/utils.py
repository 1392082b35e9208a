import math
from decimal import Decimal


def format_metric_value(value):
    """
    Texto padrão do float, sem precisão fixa e sem notação exponencial.
    Valores inteiros saem sem o '.0' (25.0 -> '25'), como o Slack já recebia antes.
    """
    number = float(value)
    if not math.isfinite(number):
        return repr(number)
    if number.is_integer():
        return str(int(number))
    # repr dá os dígitos mínimos; Decimal expande 1e-07 -> 0.0000001
    return format(Decimal(repr(number)), 'f')
