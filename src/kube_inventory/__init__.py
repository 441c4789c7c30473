"""Read-only HTTP facade over the Kubernetes list APIs."""

__version__ = "1.0.0"
