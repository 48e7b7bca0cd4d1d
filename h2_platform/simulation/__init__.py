"""Scenario runner, CLI and multi-day production profile."""

from h2_platform.simulation.profile import ProductionProfile, simulate_weekly_profile
from h2_platform.simulation.runner import (
    SimulationResult,
    run_scenario,
    run_scenarios,
    run_from_config,
    main,
)

__all__ = [
    "ProductionProfile",
    "simulate_weekly_profile",
    "SimulationResult",
    "run_scenario",
    "run_scenarios",
    "run_from_config",
    "main",
]
