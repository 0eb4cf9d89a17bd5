from __future__ import annotations

from unittest.mock import Mock, patch

from src.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch('sys.stdout.isatty', return_value=True):
        assert is_tty_enabled() is True
    with patch('sys.stdout.isatty', return_value=False):
        assert is_tty_enabled() is False


class TestProgressTracker:
    """Test cases for ProgressTracker class."""

    def test_init_with_tty_enabled(self):
        with patch('src.services.progress.is_tty_enabled', return_value=True), \
             patch('src.services.progress.tqdm') as mock_tqdm:
            tracker = ProgressTracker(3, description="Test sources")

            assert tracker.total_sources == 3
            assert tracker.enabled is True
            mock_tqdm.assert_called_once_with(
                total=3,
                desc="Test sources",
                unit="source",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )

    def test_init_with_tty_disabled(self):
        with patch('src.services.progress.is_tty_enabled', return_value=False):
            tracker = ProgressTracker(3)
            assert tracker.enabled is False
            assert tracker.pbar is None
            # TTY 無効時は全操作が no-op
            tracker.start_source("a.csv")
            tracker.set_postfix(records=1)
            tracker.finish_source()
            tracker.close()
            assert tracker.current_source == 1

    def test_source_lifecycle_updates_bar(self):
        mock_pbar = Mock()
        with patch('src.services.progress.is_tty_enabled', return_value=True), \
             patch('src.services.progress.tqdm', return_value=mock_pbar):
            with ProgressTracker(2, description="Loading") as tracker:
                tracker.start_source("singles.csv")
                mock_pbar.set_description.assert_called_with("Loading (singles.csv)")
                tracker.set_postfix(success=1)
                mock_pbar.set_postfix.assert_called_once_with(success=1)
                tracker.finish_source()
                mock_pbar.update.assert_called_once_with(1)
                mock_pbar.set_description.assert_called_with("Loading")
            mock_pbar.close.assert_called_once()
            assert tracker.pbar is None
