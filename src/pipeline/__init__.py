from src.pipeline.config import RunConfig
from src.pipeline.runner import process_bytes, run

__all__ = [
    "RunConfig",
    "process_bytes",
    "run",
]
