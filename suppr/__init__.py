"""
Suppr - a small Kubernetes debugger that shells out to kubectl.
"""

__version__ = "0.1.0"
