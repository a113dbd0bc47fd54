from .core import run_case, run_batch, round_seed, DEFAULT_MAX_WRONG
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_batch", "round_seed", "DEFAULT_MAX_WRONG", "write_csv", "write_manifest"]
