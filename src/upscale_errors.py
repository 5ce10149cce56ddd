"""Exceptions raised by the upscaler and its I/O helpers.

Library code raises these; only the command line turns them into exit codes.
"""


class UpscaleError(Exception):
    """Base class for every failure of an upscale run."""


class UsageError(UpscaleError):
    """The command line was called with missing or extra arguments."""


class InvalidArgument(UpscaleError, ValueError):
    """A scale factor, pixel grid or configuration value is out of range."""


class DecodeError(UpscaleError):
    """The input image could not be read or decoded."""


class EncodeError(UpscaleError):
    """The output image could not be encoded or written."""


class UpscaleCancelled(UpscaleError):
    """The run was cancelled before the fill pass completed."""
