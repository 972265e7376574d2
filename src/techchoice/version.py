"""Version information for techchoice."""

__version__ = "0.1.0"
