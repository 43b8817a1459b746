"""Daily puzzle solutions for December 2024, one module per day from day01 to day18."""

__version__ = "0.1.0"