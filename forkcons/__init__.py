"""Process, pipe and thread tools: divisor detection, a generator/detector pipeline and a producer-consumer printer."""

__version__ = "0.1.0"