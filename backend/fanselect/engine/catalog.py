"""
In-memory fan catalog.

Holds the fan records served to the customer portal and edited by the admin
console. Nothing is persisted: a fresh catalog is seeded with a handful of
representative fans on startup.
"""

import logging
from typing import Iterable, Sequence

from fanselect.models.curve import PerformancePoint
from fanselect.models.fan import Dimensions, ElectricalSpecs, Fan, FanBase, FanFilter

logger = logging.getLogger(__name__)


class FanNotFoundError(KeyError):
    """Raised when a fan id is not in the catalog."""

    def __init__(self, fan_id: int):
        super().__init__(fan_id)
        self.fan_id = fan_id

    def __str__(self) -> str:
        return f"Fan {self.fan_id} not found"


class FanCatalog:
    """Fan records keyed by id; ids are assigned sequentially and never reused."""

    def __init__(self, fans: Iterable[FanBase] = ()):
        self._fans: dict[int, Fan] = {}
        self._next_id = 1
        for fan in fans:
            self.add(fan)

    def __len__(self) -> int:
        return len(self._fans)

    def __contains__(self, fan_id: int) -> bool:
        return fan_id in self._fans

    def all(self) -> list[Fan]:
        return list(self._fans.values())

    def get(self, fan_id: int) -> Fan:
        try:
            return self._fans[fan_id]
        except KeyError:
            raise FanNotFoundError(fan_id) from None

    def get_many(self, fan_ids: Sequence[int]) -> list[Fan]:
        return [self.get(fan_id) for fan_id in fan_ids]

    def add(self, data: FanBase) -> Fan:
        fan = Fan(id=self._next_id, **data.model_dump())
        self._fans[fan.id] = fan
        self._next_id += 1
        logger.info("Added fan %d (%s)", fan.id, fan.model)
        return fan

    def add_batch(self, items: Sequence[FanBase]) -> list[Fan]:
        added = [self.add(item) for item in items]
        logger.debug("Batch added %d fans", len(added))
        return added

    def update(self, fan_id: int, data: FanBase) -> Fan:
        if fan_id not in self._fans:
            raise FanNotFoundError(fan_id)
        fan = Fan(id=fan_id, **data.model_dump())
        self._fans[fan_id] = fan
        logger.info("Updated fan %d (%s)", fan_id, fan.model)
        return fan

    def delete(self, fan_id: int) -> Fan:
        try:
            fan = self._fans.pop(fan_id)
        except KeyError:
            raise FanNotFoundError(fan_id) from None
        logger.info("Deleted fan %d (%s)", fan_id, fan.model)
        return fan


def filter_fans(fans: Iterable[Fan], fan_filter: FanFilter) -> list[Fan]:
    """
    Fans that can deliver the requested airflow and static pressure within
    their rated temperature range.
    """
    matches = [
        fan for fan in fans
        if fan.max_airflow >= fan_filter.airflow
        and fan.max_static_pressure >= fan_filter.static_pressure
        and fan.min_temp <= fan_filter.temperature <= fan.max_temp
    ]
    logger.debug(
        "Filter airflow=%s pressure=%s temperature=%s matched %d fans",
        fan_filter.airflow,
        fan_filter.static_pressure,
        fan_filter.temperature,
        len(matches),
    )
    return matches


def _curve(*samples: tuple[float, float, float]) -> tuple[PerformancePoint, ...]:
    return tuple(
        PerformancePoint(airflow=q, static_pressure=p, power=w) for q, p, w in samples
    )


SEED_FANS: list[FanBase] = [
    FanBase(
        model="AXC-560M",
        type="Axial",
        manufacturer="Systemair",
        description="Medium-pressure axial fan for general ventilation and smoke extract.",
        max_airflow=25000,
        max_static_pressure=450,
        power_consumption=4.5,
        motor_rpm=1450,
        noise_level=75,
        min_temp=-20,
        max_temp=60,
        fluid_type=["clean air", "smoke"],
        price=180_000_000,
        dimensions=Dimensions(height=700, width=700, depth=400),
        performance_curve=_curve(
            (0, 480, 2.5), (10000, 400, 3.4), (18000, 300, 4.0), (25000, 150, 4.5),
        ),
    ),
    FanBase(
        model="CBM-400",
        type="Centrifugal",
        manufacturer="Ziehl-Abegg",
        description="Backward-curved centrifugal fan for ducted high-pressure systems.",
        max_airflow=18000,
        max_static_pressure=1200,
        power_consumption=7.5,
        motor_rpm=2900,
        noise_level=82,
        min_temp=-10,
        max_temp=80,
        fluid_type=["clean air"],
        price=320_000_000,
        dimensions=Dimensions(height=900, width=850, depth=750),
        performance_curve=_curve(
            (0, 1250, 4.0), (6000, 1180, 5.6), (12000, 950, 6.9), (18000, 520, 7.5),
        ),
    ),
    FanBase(
        model="JF-315",
        type="Jet Fan",
        manufacturer="Fläkt Woods",
        description="Reversible jet fan for car-park ventilation.",
        max_airflow=32000,
        max_static_pressure=300,
        power_consumption=5.5,
        motor_rpm=1450,
        noise_level=70,
        min_temp=-30,
        max_temp=300,
        fluid_type=["clean air", "smoke"],
        price=240_000_000,
        electrical_specs=ElectricalSpecs(voltage=400, phase=3, frequency=50),
        dimensions=Dimensions(height=500, width=500, depth=1800),
        performance_curve=_curve(
            (0, 320, 3.0), (8000, 300, 3.8), (16000, 250, 4.6), (24000, 170, 5.1),
            (32000, 60, 5.5),
        ),
    ),
    FanBase(
        model="RF-250",
        type="Roof Fan",
        manufacturer="S&P",
        description="Compact roof exhaust fan for light industrial buildings.",
        max_airflow=6000,
        max_static_pressure=250,
        power_consumption=0.75,
        motor_rpm=1400,
        noise_level=58,
        min_temp=-20,
        max_temp=50,
        fluid_type=["clean air"],
        price=45_000_000,
        electrical_specs=ElectricalSpecs(voltage=220, phase=1, frequency=50),
        dimensions=Dimensions(height=450, width=600, depth=600),
        performance_curve=_curve(
            (0, 270, 0.45), (2000, 240, 0.6), (4000, 180, 0.7), (6000, 90, 0.75),
        ),
    ),
]


def seed_catalog() -> FanCatalog:
    """A catalog pre-loaded with the representative seed fans."""
    return FanCatalog(SEED_FANS)
