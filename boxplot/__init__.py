"""Box plots for the plan9 plot(1) command."""

__version__ = "0.1.0"
