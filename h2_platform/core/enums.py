"""
String-based enumerations for calculation inputs.

All enums subclass ``str`` so values read from YAML/JSON scenario files
(plain strings) compare equal to the members and can be used directly as
lookup keys.

Examples:
    ElectrolyzerType.PEM == 'PEM'        # True
    TransportType('pipeline')            # TransportType.PIPELINE
"""

from enum import Enum


class ElectrolyzerType(str, Enum):
    """Water electrolysis technology."""
    PEM = "PEM"             # Proton exchange membrane
    ALKALINE = "Alkaline"   # Alkaline electrolyte
    SOEC = "SOEC"           # Solid oxide, high temperature


class ProductionType(str, Enum):
    """
    Low-carbon hydrogen pathway whose output displaces gray hydrogen.

    Used by the carbon offset calculator to choose between full and
    partial displacement of steam-reforming emissions.
    """
    GREEN = "green"   # Renewable electricity + electrolysis
    BLUE = "blue"     # Reforming + carbon capture


class TransportType(str, Enum):
    """Hydrogen delivery method."""
    TUBE_TRAILER = "tube_trailer"   # Compressed gas in tubes
    TANKER = "tanker"               # Liquid hydrogen tanker
    PIPELINE = "pipeline"           # Amortized pipeline


class StorageType(str, Enum):
    """Hydrogen storage technology."""
    COMPRESSED = "compressed"
    LIQUID = "liquid"
    METAL_HYDRIDE = "metal_hydride"
    UNDERGROUND = "underground"


class RenewableType(str, Enum):
    """Renewable electricity source feeding the electrolyzer."""
    SOLAR = "solar"
    WIND = "wind"
    HYDRO = "hydro"
