"""zenith-create -- scaffolds new Zenith applications.

Creates the project directory, writes a starter tree (manifest plus one
example page) and installs dependencies with the configured package manager.
"""

__version__ = "0.1.0"
