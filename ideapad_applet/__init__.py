"""Read and change Lenovo IdeaPad laptop settings exposed by the ideapad-laptop driver."""

__version__ = "0.1.0"
__all__ = ["applet", "sysfs", "writer"]