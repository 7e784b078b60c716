"""skeinsum: print or check Skein checksums."""

__version__ = "0.1.0"
