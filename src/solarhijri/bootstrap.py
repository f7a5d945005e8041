from __future__ import annotations
import logging

from solarhijri.core.chronology import ChronologyRegistry
from solarhijri.engines.chronology import SolarHijriChronology

logger = logging.getLogger(__name__)

def register(registry: ChronologyRegistry) -> bool:
    """
    Add the Solar Hijri chronology to `registry`.
    Failures are logged and reported as False, never raised.
    """
    chrono = SolarHijriChronology.INSTANCE
    try:
        registry.register(chrono)
    except Exception:
        logger.warning("Could not register %s chronology.", chrono.id, exc_info=True)
        return False
    logger.debug("Registered chronology %s (calendar type %s)", chrono.id, chrono.calendar_type)
    return True

def build_registry() -> ChronologyRegistry:
    registry = ChronologyRegistry()
    register(registry)
    return registry
