"""
Tests for the scenario runner and CLI.

Validates:
- Each optional step (storage, transport, economics) is evaluated when configured
- Performance model derating
- JSON report output and CLI exit codes
"""

import json

import pytest

from h2_platform.config.scenario_config import (
    EconomicsConfig,
    ScenarioConfig,
    ScenarioFile,
    StorageConfig,
    TransportConfig,
)
from h2_platform.core.exceptions import DegenerateInputError
from h2_platform.economics.lcoh import calculate_lcoh
from h2_platform.simulation.runner import main, run_from_config, run_scenario, run_scenarios


@pytest.fixture
def baseline():
    return ScenarioConfig(name='baseline', energy_input_kwh=1000, electrolyzer_efficiency=70)


class TestRunScenario:

    def test_production_only(self, baseline):
        result = run_scenario(baseline)
        assert result.scenario == 'baseline'
        assert result.hydrogen_produced_kg == pytest.approx(14.0)
        assert result.water_consumption_liters == pytest.approx(126)
        assert result.water_consumption_practical_liters == pytest.approx(138.6)
        assert result.carbon_offset_kg == pytest.approx(14 * 9.3)
        assert result.energy_efficiency_percent == 70
        assert result.compression_energy_kwh is None
        assert result.liquefaction_energy_kwh is None
        assert result.transportation_cost_usd is None
        assert result.lcoh_usd_per_kg is None

    def test_blue_production_offset(self, baseline):
        config = ScenarioConfig(name='blue', energy_input_kwh=1000, electrolyzer_efficiency=70,
                                production_type='blue')
        assert run_scenario(config).carbon_offset_kg == pytest.approx(14 * 7.3)

    def test_compressed_storage(self):
        config = ScenarioConfig(name='c', energy_input_kwh=1000, electrolyzer_efficiency=70,
                                storage=StorageConfig(target_pressure_bar=350))
        result = run_scenario(config)
        assert result.compression_energy_kwh == pytest.approx(14 * 2.94)
        assert result.liquefaction_energy_kwh is None

    def test_liquid_storage(self):
        config = ScenarioConfig(name='l', energy_input_kwh=1000, electrolyzer_efficiency=70,
                                storage=StorageConfig(method='liquid'))
        result = run_scenario(config)
        assert result.liquefaction_energy_kwh == pytest.approx(14 * 11)
        assert result.compression_energy_kwh is None

    def test_transport(self):
        config = ScenarioConfig(name='t', energy_input_kwh=1000, electrolyzer_efficiency=70,
                                transport=TransportConfig(distance_km=100, transport_type='pipeline'))
        assert run_scenario(config).transportation_cost_usd == pytest.approx(14 * 100 * 0.05)

    def test_transport_skipped_without_production(self):
        config = ScenarioConfig(name='t', energy_input_kwh=0, electrolyzer_efficiency=70,
                                transport=TransportConfig(distance_km=100))
        assert run_scenario(config).transportation_cost_usd is None

    def test_economics_with_derived_annual_production(self):
        econ = EconomicsConfig(capex_usd=1_000_000, annual_opex_usd=50_000, runs_per_year=300)
        config = ScenarioConfig(name='e', energy_input_kwh=1000, electrolyzer_efficiency=70, economics=econ)
        expected = calculate_lcoh(
            capex_usd=1_000_000, annual_opex_usd=50_000, annual_production_kg=14.0 * 300,
            lifetime_years=20, discount_rate=0.08,
        )
        assert run_scenario(config).lcoh_usd_per_kg == pytest.approx(expected.lcoh_usd_per_kg)

    def test_performance_model_derates_efficiency(self):
        kwargs = dict(name='p', energy_input_kwh=1000, electrolyzer_efficiency=70, temperature_celsius=40)
        plain = run_scenario(ScenarioConfig(**kwargs))
        derated = run_scenario(ScenarioConfig(**kwargs, apply_performance_model=True))
        assert derated.energy_efficiency_percent == pytest.approx(66.5)
        assert derated.hydrogen_produced_kg < plain.hydrogen_produced_kg

    def test_calculation_errors_propagate(self):
        config = ScenarioConfig(name='bad', energy_input_kwh=1000, electrolyzer_efficiency=70,
                                storage=StorageConfig(source_pressure_bar=0))
        with pytest.raises(DegenerateInputError):
            run_scenario(config)


def test_run_scenarios_preserves_order(baseline):
    second = ScenarioConfig(name='second', energy_input_kwh=500, electrolyzer_efficiency=60)
    results = run_scenarios(ScenarioFile(scenarios=[second, baseline]))
    assert list(results) == ['second', 'baseline']


def test_run_from_config_writes_report(tmp_path, scenario_yaml):
    config_file = tmp_path / "scenarios.yaml"
    config_file.write_text(scenario_yaml)
    output = tmp_path / "out" / "report.json"

    report = run_from_config(config_file, output_path=output)

    assert output.exists()
    written = json.loads(output.read_text())
    assert written == report
    assert report['name'] == "Test Scenarios"

    baseline = report['results']['baseline']
    assert baseline['hydrogen_produced_kg'] == pytest.approx(14.0)
    assert baseline['transportation_cost_usd'] == pytest.approx(70)
    assert baseline['lcoh_usd_per_kg'] == pytest.approx(20.185, abs=1e-3)

    soec = report['results']['soec_liquid']
    assert soec['hydrogen_produced_kg'] == pytest.approx(900 * 0.8 / 45)
    assert soec['liquefaction_energy_kwh'] == pytest.approx(16 * 11)


class TestCLI:

    def test_success(self, tmp_path, scenario_yaml):
        config_file = tmp_path / "scenarios.yaml"
        config_file.write_text(scenario_yaml)
        output = tmp_path / "report.json"

        assert main([str(config_file), '--output', str(output), '--log-level', 'WARNING']) == 0
        assert 'baseline' in json.loads(output.read_text())['results']

    def test_prints_report_without_output(self, tmp_path, scenario_yaml, capsys):
        config_file = tmp_path / "scenarios.yaml"
        config_file.write_text(scenario_yaml)

        assert main([str(config_file)]) == 0
        printed = json.loads(capsys.readouterr().out)
        assert set(printed['results']) == {'baseline', 'soec_liquid'}

    def test_missing_file_returns_error_status(self, tmp_path):
        assert main([str(tmp_path / "missing.yaml")]) == 1

    def test_undecodable_file_returns_error_status(self, tmp_path):
        config_file = tmp_path / "binary.yaml"
        config_file.write_bytes(b"name: \xff\xfe bad\nscenarios: []\n")
        assert main([str(config_file)]) == 1

    def test_directory_returns_error_status(self, tmp_path):
        config_dir = tmp_path / "scenarios.yaml"
        config_dir.mkdir()
        assert main([str(config_dir)]) == 1
