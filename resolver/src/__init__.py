"""Resolution service: second stage of the CEP temperature pipeline.

Validates a CEP, looks it up in the postal directory, reads the current
temperature at the returned coordinates and reports it in Celsius,
Fahrenheit and Kelvin.
"""

__version__ = "1.0.0"
