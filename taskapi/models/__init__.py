from .task import INT64_MAX, INT64_MIN, Task

__all__ = ["Task", "INT64_MIN", "INT64_MAX"]
