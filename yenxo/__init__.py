"""Tagged Variant values with checked conversions, value equality, JSON input and output, and enum string conversion."""

__version__ = "0.1.0"