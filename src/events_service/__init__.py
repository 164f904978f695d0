"""Events Service - REST backend for conferences, workshops, webinars and meetups."""

__version__ = "0.1.0"
