from .core import run_round
from .io import write_csv, write_manifest, timestamp_id

__all__ = ["run_round", "write_csv", "write_manifest", "timestamp_id"]
