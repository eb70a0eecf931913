"""fxjournal - trade journal and performance analytics for forex traders."""

__version__ = "0.1.0"
