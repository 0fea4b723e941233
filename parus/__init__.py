"""Core services of a small game engine: logs, asserts, services, events, utils, input, configs and linear algebra."""

__version__ = "0.3.0"