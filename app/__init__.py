"""Application package initializer.

Ensures the local ``app`` package takes precedence over similarly named
dependencies that might be installed in the environment.
"""

# Nothing is re-exported here; the presence of this file is enough for
# Python to treat ``app`` as a regular package instead of a namespace package.
