"""
High-Level Scenario Runner Utilities.

This module chains the calculators for each configured scenario and
provides the command-line entry point.

Entry Points:
    - `run_scenario()`: Evaluate one ScenarioConfig.
    - `run_scenarios()`: Evaluate every scenario of a ScenarioFile.
    - `run_from_config()`: Load a scenario file, run it, write a JSON report.
    - `main()`: CLI entry point for command-line execution.

Workflow per scenario:
    1. Optionally derate efficiency with the electrolyzer performance model.
    2. Calculate hydrogen production, water and carbon offset.
    3. Storage step: compression or liquefaction energy.
    4. Transport step: delivery cost.
    5. Economics step: levelized cost of hydrogen.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional
import argparse
import json
import logging

from h2_platform.calculations.performance import adjust_efficiency
from h2_platform.calculations.production import (
    calculate_carbon_offset,
    calculate_hydrogen_production,
    calculate_water_consumption,
)
from h2_platform.calculations.storage import (
    calculate_compression_energy,
    calculate_liquefaction_energy,
)
from h2_platform.config.loaders import load_scenario_file
from h2_platform.config.scenario_config import ScenarioConfig, ScenarioFile
from h2_platform.core.enums import StorageType
from h2_platform.core.exceptions import H2PlatformError
from h2_platform.economics.lcoh import calculate_lcoh
from h2_platform.economics.models import LCOHParams, TransportationCostParams
from h2_platform.economics.transport import calculate_transportation_cost

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Outputs of one scenario. Optional fields are None when the step is not configured."""
    scenario: str
    hydrogen_produced_kg: float
    water_consumption_liters: float
    water_consumption_practical_liters: float
    carbon_offset_kg: float
    energy_efficiency_percent: float
    compression_energy_kwh: Optional[float] = None
    liquefaction_energy_kwh: Optional[float] = None
    transportation_cost_usd: Optional[float] = None
    lcoh_usd_per_kg: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def run_scenario(config: ScenarioConfig) -> SimulationResult:
    """
    Evaluate one scenario.

    Args:
        config (ScenarioConfig): Scenario definition.

    Returns:
        SimulationResult: Production, resource and cost figures.

    Raises:
        H2PlatformError: If any calculator rejects its inputs.
    """
    efficiency = config.electrolyzer_efficiency
    if config.apply_performance_model:
        efficiency = adjust_efficiency(
            config.electrolyzer_type,
            efficiency,
            temperature_c=config.temperature_celsius,
            pressure_bar=config.pressure_bar,
            current_density=config.current_density_acm2,
        )
        logger.debug(
            f"[{config.name}] efficiency derated "
            f"{config.electrolyzer_efficiency:.2f}% -> {efficiency:.2f}%"
        )

    production = calculate_hydrogen_production(
        energy_input=config.energy_input_kwh,
        efficiency=efficiency,
        electrolyzer_type=config.electrolyzer_type,
        temperature=config.temperature_celsius,
        pressure=config.pressure_bar,
    )
    h2_kg = production.hydrogen_produced
    water = calculate_water_consumption(h2_kg)
    offset = calculate_carbon_offset(h2_kg, config.production_type)

    compression_energy = None
    liquefaction_energy = None
    if config.storage is not None:
        if config.storage.method == StorageType.LIQUID.value:
            liquefaction_energy = calculate_liquefaction_energy(h2_kg)
        else:
            compression_energy = calculate_compression_energy(
                h2_kg,
                config.storage.source_pressure_bar,
                config.storage.target_pressure_bar,
            ).energy_required

    transport_cost = None
    if config.transport is not None:
        if h2_kg == 0:
            logger.warning(f"[{config.name}] no hydrogen produced, skipping transport cost")
        else:
            transport_cost = calculate_transportation_cost(TransportationCostParams(
                hydrogen_kg=h2_kg,
                distance_km=config.transport.distance_km,
                transport_type=config.transport.transport_type,
            )).total_cost

    lcoh = None
    if config.economics is not None:
        econ = config.economics
        annual_production = econ.annual_production_kg
        if annual_production is None:
            annual_production = h2_kg * econ.runs_per_year
        if annual_production == 0:
            logger.warning(f"[{config.name}] zero annual production, skipping LCOH")
        else:
            lcoh = calculate_lcoh(LCOHParams(
                capex_usd=econ.capex_usd,
                annual_opex_usd=econ.annual_opex_usd,
                annual_production_kg=annual_production,
                lifetime_years=econ.lifetime_years,
                discount_rate=econ.discount_rate,
            )).lcoh_usd_per_kg

    return SimulationResult(
        scenario=config.name,
        hydrogen_produced_kg=h2_kg,
        water_consumption_liters=water.theoretical,
        water_consumption_practical_liters=water.practical,
        carbon_offset_kg=offset.total_offset,
        energy_efficiency_percent=production.energy_efficiency,
        compression_energy_kwh=compression_energy,
        liquefaction_energy_kwh=liquefaction_energy,
        transportation_cost_usd=transport_cost,
        lcoh_usd_per_kg=lcoh,
    )


def run_scenarios(scenario_file: ScenarioFile) -> Dict[str, SimulationResult]:
    """
    Evaluate every scenario in a file.

    Returns:
        Dict[str, SimulationResult]: Mapping of scenario name to result,
        in file order.
    """
    results = {}
    for config in scenario_file.scenarios:
        logger.info(f"Running scenario: {config.name}")
        results[config.name] = run_scenario(config)
    return results


def run_from_config(
    config_path: Path | str,
    output_path: Optional[Path | str] = None,
) -> Dict[str, Any]:
    """
    Run all scenarios from a configuration file.

    Args:
        config_path (Path | str): Scenario YAML/JSON file.
        output_path (Path | str, optional): Where to write the JSON report.

    Returns:
        Dict[str, Any]: Report with file metadata and per-scenario results.

    Example:
        >>> report = run_from_config("scenarios/baseline.yaml")
        >>> report['results']['baseline']['hydrogen_produced_kg']
    """
    scenario_file = load_scenario_file(config_path)
    results = run_scenarios(scenario_file)

    report = {
        'name': scenario_file.name,
        'version': scenario_file.version,
        'description': scenario_file.description,
        'results': {name: result.to_dict() for name, result in results.items()},
    }

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(report, f, indent=2)
        logger.info(f"Report written to {output_path}")

    return report


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point for command-line scenario execution.

    Usage:
        h2-calc scenarios.yaml --output ./results/report.json

    Returns:
        int: Exit status, 0 on success and 1 if loading or a calculation fails.
    """
    parser = argparse.ArgumentParser(description='Hydrogen platform scenario calculator')
    parser.add_argument('config', type=str, help='Scenario configuration file (.yaml/.yml/.json)')
    parser.add_argument('--output', '-o', type=str, default=None, help='Write JSON report to this path')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        report = run_from_config(args.config, output_path=args.output)
    except H2PlatformError as e:
        logger.error(f"Scenario run failed: {e}")
        return 1

    if args.output is None:
        print(json.dumps(report, indent=2))

    for name, result in report['results'].items():
        logger.info(f"{name}: {result['hydrogen_produced_kg']:.2f} kg H2")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
