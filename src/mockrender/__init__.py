"""mockrender - code generation backend for a Swift test-double framework."""

__version__ = "0.1.0"
