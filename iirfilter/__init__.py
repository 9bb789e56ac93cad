"""Single-channel recursive (IIR) digital filter."""

from .iir import IIRFilter, InvalidArgument, lfilter  # noqa: F401

__version__ = '0.1.0'
