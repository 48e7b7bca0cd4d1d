"""
Pytest configuration and fixtures for h2_platform testing.

This file sets up common fixtures, test configuration, and hooks for pytest.
"""

import pytest


def pytest_configure(config):
    """Configure pytest settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def pem_run():
    """1000 kWh through a 70 % PEM electrolyzer (14 kg H2)."""
    return {'energy_input': 1000, 'efficiency': 70, 'electrolyzer_type': 'PEM'}


@pytest.fixture
def lcoh_baseline():
    """$1M plant, $100k/yr OPEX, 10 t/yr over 20 years."""
    return {
        'capex_usd': 1_000_000,
        'annual_opex_usd': 100_000,
        'annual_production_kg': 10_000,
        'lifetime_years': 20,
        'discount_rate': 0.08,
    }


@pytest.fixture
def scenario_yaml():
    """Two-scenario YAML document covering every optional step."""
    return """
name: "Test Scenarios"
version: "1.0"
description: "Baseline PEM and blue SOEC"
scenarios:
  - name: baseline
    energy_input_kwh: 1000
    electrolyzer_efficiency: 70
    electrolyzer_type: PEM
    storage:
      method: compressed
      target_pressure_bar: 350
      source_pressure_bar: 1
    transport:
      distance_km: 100
      transport_type: pipeline
    economics:
      capex_usd: 1000000
      annual_opex_usd: 100000
      annual_production_kg: 10000
      lifetime_years: 20
      discount_rate: 0.08
  - name: soec_liquid
    energy_input_kwh: 900
    electrolyzer_efficiency: 80
    electrolyzer_type: SOEC
    production_type: blue
    storage:
      method: liquid
"""
