"""zfs-rewrite-resume - restartable, breadth-first driver for zfs rewrite."""

__version__ = "0.1.0"
