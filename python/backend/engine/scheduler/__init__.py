from backend.engine.scheduler.scheduler import (
    Handle,
    ManualScheduler,
    MonotonicScheduler,
    Scheduler,
)

__all__ = ["Handle", "ManualScheduler", "MonotonicScheduler", "Scheduler"]
