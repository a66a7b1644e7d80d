"""Fleet catalog - a small in-memory airline fleet model.

Aircraft are created by a factory, assembled into fleets by a builder and
queried for total capacity, range order and fuel consumption.
"""

__version__ = "0.1.0"
