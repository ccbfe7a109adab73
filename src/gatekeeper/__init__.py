"""Gatekeeper - система гейтов для допуска запросов на выпуск.

- 6 gates с фиксированным порядком (GATE 0..5)
- Первый заблокировавший gate определяет ошибку
"""

from .gates.gate_00_sale_phase import Gate00SalePhase, Gate00Result

__all__ = [
    "Gate00SalePhase",
    "Gate00Result",
]
