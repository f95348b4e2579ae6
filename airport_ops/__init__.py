"""
Brisbane Domestic Airport operations simulator.

An in-memory model of a small airport's day-to-day operations:
1. Registering travellers, frequent flyers and flight managers
2. Registering arrival and departure flights and delaying them
3. Booking seats with privilege-aware seat contention rules

Delays applied to an arrival cascade to departures flown by the same aircraft.
"""

__version__ = "0.1.0"
