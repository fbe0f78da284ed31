"""A side-scrolling arcade game of dodging enemies and collecting coins, built on pygame."""

__version__ = "0.1.0"