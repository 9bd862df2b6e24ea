from .plotting import plot_archive_front

__all__ = ["plot_archive_front"]
