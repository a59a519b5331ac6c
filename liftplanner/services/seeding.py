"""Seed the reference training scenarios into an empty database."""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from liftplanner.models.scenario import Scenario, ScenarioObstruction

logger = logging.getLogger(__name__)

SEED_SCENARIOS = [
    {
        "title": "Urban Building Lift",
        "description": "Lift a 2-tonne load onto a 3-storey building in a confined urban site",
        "difficulty": "beginner",
        "category": "Urban",
        "estimated_time_minutes": 15,
        "learning_objectives": "Learn to identify obstructions, assess ground conditions, and select appropriate equipment",
        "site_width": 30,
        "site_length": 40,
        "load_weight": 2000,
        "load_width": 2,
        "load_length": 2,
        "load_height": 1.5,
        "load_fragile": False,
        "obstructions": [
            {"type": "building", "x": 5, "y": 10, "width": 8, "height": 12, "hazard_level": "high"},
            {"type": "power_line", "x": 15, "y": 0, "width": 20, "height": 1, "hazard_level": "critical"},
        ],
    },
    {
        "title": "Industrial Site Lift",
        "description": "Position a mobile crane on soft ground with machinery and fragile load",
        "difficulty": "intermediate",
        "category": "Industrial",
        "estimated_time_minutes": 20,
        "learning_objectives": "Learn to handle fragile loads, assess soft ground, and work in confined spaces",
        "site_width": 50,
        "site_length": 60,
        "load_weight": 3500,
        "load_width": 3,
        "load_length": 2,
        "load_height": 2,
        "load_fragile": True,
    },
    {
        "title": "High-Rise Rooftop Lift",
        "description": "Lift heavy equipment to a high-rise building rooftop with power lines",
        "difficulty": "advanced",
        "category": "Urban",
        "estimated_time_minutes": 30,
        "learning_objectives": "Master complex scenarios with multiple hazards and constraints",
        "site_width": 40,
        "site_length": 50,
        "load_weight": 5000,
        "load_width": 4,
        "load_length": 3,
        "load_height": 2.5,
        "load_fragile": False,
    },
]


async def seed_scenarios(db: AsyncSession) -> int:
    """Insert SEED_SCENARIOS if no scenario exists yet. Returns rows inserted."""
    existing = await db.scalar(select(func.count(Scenario.id)))
    if existing:
        return 0

    for data in SEED_SCENARIOS:
        data = dict(data)
        obstructions = data.pop("obstructions", [])
        scenario = Scenario(**data)
        scenario.obstructions = [ScenarioObstruction(**o) for o in obstructions]
        db.add(scenario)

    await db.commit()
    logger.info("Seeded %d training scenarios", len(SEED_SCENARIOS))
    return len(SEED_SCENARIOS)
