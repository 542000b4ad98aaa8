"""
Module catalog seed.

The catalog is static reference data; startup inserts whatever entries are
missing and never touches existing rows.
"""

import logging
from typing import List

from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.domain.entities import ModuleDefinition

logger = logging.getLogger(__name__)

DEFAULT_MODULE_CATALOG: List[dict] = [
    {
        "module_key": "order_management",
        "name": "Order Management",
        "category": "operations",
        "description": "Create, dispatch and track delivery orders",
        "default_enabled": True,
    },
    {
        "module_key": "live_tracking",
        "name": "Live Tracking",
        "category": "operations",
        "description": "Real-time driver location on a map",
        "default_enabled": True,
    },
    {
        "module_key": "route_optimization",
        "name": "Route Optimization",
        "category": "operations",
        "description": "Optimized multi-stop routing for drivers",
        "default_enabled": False,
    },
    {
        "module_key": "proof_of_delivery",
        "name": "Proof of Delivery",
        "category": "operations",
        "description": "Photo and signature capture at drop-off",
        "default_enabled": False,
    },
    {
        "module_key": "vehicle_stock",
        "name": "Vehicle Stock",
        "category": "inventory",
        "description": "Track stock carried in each vehicle",
        "default_enabled": False,
    },
    {
        "module_key": "product_catalog",
        "name": "Product Catalog",
        "category": "inventory",
        "description": "Products that can be attached to orders",
        "default_enabled": False,
    },
    {
        "module_key": "broadcast",
        "name": "Broadcast Messages",
        "category": "communication",
        "description": "Send announcements to all drivers",
        "default_enabled": True,
    },
    {
        "module_key": "customer_notifications",
        "name": "Customer Notifications",
        "category": "communication",
        "description": "SMS and WhatsApp updates to end customers",
        "default_enabled": False,
    },
    {
        "module_key": "analytics",
        "name": "Analytics",
        "category": "reporting",
        "description": "Driver performance and delivery dashboards",
        "default_enabled": False,
    },
]


async def seed_module_catalog(uow: UnitOfWork) -> int:
    """
    Insert missing catalog entries.

    Returns:
        Number of entries inserted
    """
    inserted = 0
    async with uow:
        for entry in DEFAULT_MODULE_CATALOG:
            if await uow.modules.get_by_key(entry["module_key"]):
                continue
            await uow.modules.create(ModuleDefinition(**entry))
            inserted += 1
        await uow.commit()

    if inserted:
        logger.info("Seeded %d module catalog entries", inserted)
    return inserted
