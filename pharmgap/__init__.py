"""
PharmGap
Pharmacy market-gap analysis for the kelurahan of a city.
"""

__version__ = "0.1.0"
