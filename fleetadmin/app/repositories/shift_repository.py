from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from fleetadmin.domain.entities import DriverShift, ShiftStatus


class IShiftRepository(ABC):
    """Driver shift repository interface - application layer"""

    @abstractmethod
    async def list_by_driver(
        self,
        driver_id: int,
        page: int,
        limit: int,
        company_id: Optional[int] = None,
        status: Optional[ShiftStatus] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Tuple[List[DriverShift], int]:
        """List a driver's shifts, most recent shift_date first"""
        pass

    @abstractmethod
    async def get_performance(
        self,
        driver_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Dict[str, Any]:
        """
        Aggregate completed and cancelled shifts of a driver.

        Returns:
            Dict with total_shifts, completed_shifts, total_orders,
            completed_orders, cancelled_orders, total_distance,
            total_earnings, average_rating, last_shift_date
        """
        pass
