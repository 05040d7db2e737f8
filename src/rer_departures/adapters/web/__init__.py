"""Web adapter serving the schedule API and page."""

from rer_departures.adapters.web.app import WebServer, create_app

__all__ = ["WebServer", "create_app"]
