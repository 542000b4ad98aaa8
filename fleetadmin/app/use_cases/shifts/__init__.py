"""
Shift Use Cases
"""

from .list_driver_shifts_use_case import ListDriverShiftsUseCase
from .dtos import ListShiftsQuery, PaginatedShiftsResponse, ShiftResponse, format_duration

__all__ = [
    "ListDriverShiftsUseCase",
    "ListShiftsQuery",
    "PaginatedShiftsResponse",
    "ShiftResponse",
    "format_duration",
]
