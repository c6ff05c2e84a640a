"""Settings, validation, logging sinks, string helpers and application MIME tables for a torrent streaming engine."""

__version__ = "0.0.9"