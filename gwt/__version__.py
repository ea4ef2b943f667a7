"""Version information for gwt."""

try:
    from gwt._version import __version__
except ImportError:
    # Running from a source checkout that was never installed
    __version__ = "0.0.0+unknown"
