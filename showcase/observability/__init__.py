from .prom import (
    mount_metrics,
    record_image_optimisation,
    record_maintenance,
    setup_observability,
)

__all__ = [
    "setup_observability",
    "mount_metrics",
    "record_image_optimisation",
    "record_maintenance",
]
