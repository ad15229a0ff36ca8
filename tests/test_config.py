"""Test the configuration module functionality."""

from lazyspf.config import SEARCH_CONFIG, SearchConfig


def test_search_config_defaults():
    config = SearchConfig()
    assert config.progress_interval == 10_000
    assert config.path_warning_threshold == 10_000


def test_should_report_progress():
    config = SearchConfig(progress_interval=3)
    assert [n for n in range(1, 10) if config.should_report_progress(n)] == [3, 6, 9]


def test_progress_disabled():
    config = SearchConfig(progress_interval=0)
    assert not config.should_report_progress(10_000)


def test_global_config_instance():
    assert isinstance(SEARCH_CONFIG, SearchConfig)
    assert SEARCH_CONFIG.progress_interval == 10_000
