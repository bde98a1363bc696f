"""Helper functions for the suppr application."""
from .kube import default_kubeconfig, resolve_kubeconfig

__all__ = ['default_kubeconfig', 'resolve_kubeconfig']
