"""gpp-coach: workout prescription engine for sport-category GPP/SPP/SSP training."""

__version__ = "0.1.0"
