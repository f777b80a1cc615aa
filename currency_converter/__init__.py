"""
Currency Converter - Main Package Initialization
"""
__version__ = "0.1.0"
