"""Building blocks for a DMR gateway: sync, rewrite rules, timers, buffers, hashing and UDP."""

__version__ = "0.1.0"