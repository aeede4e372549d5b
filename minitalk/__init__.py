"""Pass text between processes one bit at a time over SIGUSR1 and SIGUSR2.

Also holds small helpers for ASCII text, byte buffers, C-style strings,
printf-style output and line reading.
"""

__version__ = "1.0.0"