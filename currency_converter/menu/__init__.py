"""
Currency Converter Menu Package

This package provides a command-line interface for converting amounts
between currencies using manually maintained exchange rates.
"""
from currency_converter.menu.main import ConverterSession, SessionState, main

__all__ = ['ConverterSession', 'SessionState', 'main']
