"""Threading, logging and process utilities: queues, latches, thread pools, stream logging and log files."""

__version__ = "0.1.0"