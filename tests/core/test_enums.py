from h2_platform.core.enums import ElectrolyzerType, ProductionType, TransportType
from h2_platform.core.exceptions import (
    CalculationError,
    ConfigurationError,
    DegenerateInputError,
    H2PlatformError,
    InvalidInputError,
)


def test_enum_string_values():
    """Test enums compare equal to the plain strings used in scenario files."""
    assert ElectrolyzerType.PEM == 'PEM'
    assert ElectrolyzerType.ALKALINE == 'Alkaline'
    assert ProductionType.GREEN == 'green'
    assert TransportType('tube_trailer') is TransportType.TUBE_TRAILER


def test_exception_hierarchy():
    """Test every error is catchable through the package base class."""
    assert issubclass(InvalidInputError, CalculationError)
    assert issubclass(DegenerateInputError, CalculationError)
    assert issubclass(CalculationError, H2PlatformError)
    assert issubclass(ConfigurationError, H2PlatformError)
    assert not issubclass(ConfigurationError, CalculationError)
