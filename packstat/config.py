"""Central configuration for packstat runs."""

from dataclasses import dataclass

from .tracker._capacity import check_capacity


@dataclass
class PackStatConfig:
    """All packstat tunables in one place."""

    # --- Trackers ---
    k: int = 32  # Capacity of both the top-K and last-K collections

    # --- Stream ---
    chunk_size: int = 65536  # Bytes read per file chunk
    warn_on_partial: bool = False  # warnings.warn when trailing bits are dropped

    # --- Report ---
    top_header: str = "--Sorted Max {k} Values--"
    last_header: str = "--Last {k} Values--"

    def __post_init__(self):
        self.k = check_capacity(self.k)
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    def headers(self) -> tuple:
        return self.top_header.format(k=self.k), self.last_header.format(k=self.k)
