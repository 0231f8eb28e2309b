"""Graph algorithms, sorting algorithms and a simple TCP file server and client."""

__version__ = "0.1.0"
__all__ = ["graphs", "sorting", "fileserver", "fileclient"]