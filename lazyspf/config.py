"""Configuration classes for lazyspf searches."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Tunables for search progress reporting and path enumeration."""

    # Emit a DEBUG progress line every N settled nodes; 0 disables it
    progress_interval: int = 10_000

    # Warn once when tied-path enumeration emits more than this many paths
    path_warning_threshold: int = 10_000

    def should_report_progress(self, settled: int) -> bool:
        """Return True when ``settled`` lands on a progress boundary."""
        if self.progress_interval <= 0:
            return False
        return settled % self.progress_interval == 0


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
