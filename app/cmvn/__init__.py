"""cmvn - Clean failed downloads out of a local Maven repository.

Scans the repository for ``.lastUpdated`` marker files and removes the
directories that contain them.
"""

__version__ = "0.1.0"

PROJECT_URL = "https://github.com/clovu/cmvn"
