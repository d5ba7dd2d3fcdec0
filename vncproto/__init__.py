"""Building blocks for RFB (VNC) servers: protocol structures, handshakes,
crypto helpers, bandwidth estimation and damage refinement."""

__version__ = "0.10.0"