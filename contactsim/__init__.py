"""
Contact Simulation
==================
Contact-metrics reports for opportunistic / delay-tolerant network simulations.
"""

__version__ = "0.1.0"
