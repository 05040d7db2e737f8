"""RER departures: a thin Navitia proxy with a mobile-friendly schedule page."""

__version__ = "0.1.0"
