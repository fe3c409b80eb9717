"""Switch between Kubernetes cluster accounts of different cloud providers."""

from importlib import metadata

__all__ = ["__version__"]


def __getattr__(name: str):
    if name == "__version__":
        return metadata.version("k8sacc")
    raise AttributeError(name)
