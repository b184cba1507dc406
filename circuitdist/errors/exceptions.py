"""
This module contains the definitions of all exceptions which may be publicly raised by circuitdist
"""


class DistributionError(Exception):
    """
    Error while distributing circuit artifacts.

    The run stops at the first error, files copied before it are left in place.
    ``report`` holds what was copied up to that point (set by the distributor before the error propagates).
    """

    def __init__(self, msg: str):
        super().__init__(msg)
        self.report = None


class MissingArtifactError(DistributionError):
    """
    A required source path (build directory, circuit directory or artifact file) does not exist
    """

    def __init__(self, path: str):
        super().__init__(f'Not found: {path}')
        self.path = path


class ArtifactCopyError(DistributionError):
    """
    Creating a destination directory or copying an artifact failed
    """

    def __init__(self, src: str, dst: str, cause: OSError):
        super().__init__(f'Failed to copy {src} -> {dst}\n{cause}')
        self.src = src
        self.dst = dst
        self.cause = cause
