"""Small command-line programs and the library code behind them."""

__version__ = "0.1.0"