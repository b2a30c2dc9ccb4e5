from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock, patch

from i18n_sheet.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch("sys.stdout.isatty", return_value=True):
        assert is_tty_enabled() is True
    with patch("sys.stdout.isatty", return_value=False):
        assert is_tty_enabled() is False


class TestProgressTracker:
    def test_init_with_tty_enabled(self):
        with patch("i18n_sheet.services.progress.is_tty_enabled", return_value=True), \
             patch("i18n_sheet.services.progress.tqdm") as mock_tqdm:
            tracker = ProgressTracker(5, description="Exporting")
            assert tracker.enabled is True
            mock_tqdm.assert_called_once_with(
                total=5,
                desc="Exporting",
                unit="file",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )

    def test_init_with_tty_disabled(self):
        with patch("i18n_sheet.services.progress.is_tty_enabled", return_value=False):
            tracker = ProgressTracker(5)
            assert tracker.enabled is False
            assert tracker.pbar is None

    def test_file_lifecycle_updates_bar(self):
        mock_pbar = Mock()
        with patch("i18n_sheet.services.progress.is_tty_enabled", return_value=True), \
             patch("i18n_sheet.services.progress.tqdm", return_value=mock_pbar):
            tracker = ProgressTracker(2, description="Importing")
            tracker.start_file(Path("res/messages_de.properties"))
            mock_pbar.set_description.assert_called_with("Importing (messages_de.properties)")
            tracker.finish_file(success=False)
            mock_pbar.update.assert_called_once_with(1)
            mock_pbar.set_description.assert_called_with("Importing")
            assert tracker.current_file == 1
            assert tracker.failed_files == 1

    def test_context_manager_closes_bar(self):
        mock_pbar = Mock()
        with patch("i18n_sheet.services.progress.is_tty_enabled", return_value=True), \
             patch("i18n_sheet.services.progress.tqdm", return_value=mock_pbar):
            with ProgressTracker(1) as tracker:
                tracker.set_postfix(rows=3)
            mock_pbar.set_postfix.assert_called_once_with(rows=3)
            mock_pbar.close.assert_called_once()
            assert tracker.pbar is None

    def test_disabled_tracker_is_noop(self):
        with patch("i18n_sheet.services.progress.is_tty_enabled", return_value=False):
            with ProgressTracker(1) as tracker:
                tracker.start_file(Path("a.properties"))
                tracker.set_postfix(rows=1)
                tracker.finish_file()
            assert tracker.current_file == 1
