"""
Benchmark configuration loaded from YAML.
"""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from src.gmath.errors import InvalidLength


@dataclass
class BenchmarkConfig:
    """Settings for scripts/benchmark_transforms.py."""
    # Transform lengths to benchmark
    sizes: List[int] = field(default_factory=lambda: [64, 100, 128, 210, 256, 360, 512, 1000])
    # Timed repetitions per transform
    repeats: int = 5
    seed: int = 0
    # The O(N²) direct transform is skipped above this length
    direct_max_size: int = 512
    # Maximum error tolerated against numpy.fft before a size is flagged
    tolerance: float = 1e-10
    log_file: Optional[str] = None

    def __post_init__(self):
        self.sizes = [int(n) for n in self.sizes]
        for n in self.sizes:
            if n <= 0:
                raise InvalidLength(f"Benchmark sizes must be positive, got {n}")
        if self.repeats < 1:
            raise ValueError(f"repeats must be >= 1, got {self.repeats}")

    def to_dict(self) -> Dict:
        return asdict(self)


def config_from_dict(data: Optional[Dict]) -> BenchmarkConfig:
    """Build a BenchmarkConfig, rejecting unknown keys."""
    data = dict(data or {})
    known = {f.name for f in fields(BenchmarkConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown benchmark config keys: {unknown}")
    return BenchmarkConfig(**data)


def load_config(config_path: Union[str, Path]) -> BenchmarkConfig:
    """Load configuration from YAML file."""
    with open(config_path, 'r') as f:
        return config_from_dict(yaml.safe_load(f))
