from __future__ import annotations

from unittest.mock import Mock, patch

from json_uploads.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch("sys.stdout.isatty", return_value=True):
        assert is_tty_enabled() is True

    with patch("sys.stdout.isatty", return_value=False):
        assert is_tty_enabled() is False


class TestProgressTracker:

    def test_init_with_tty_enabled(self):
        with patch("json_uploads.services.progress.is_tty_enabled", return_value=True), \
             patch("json_uploads.services.progress.tqdm") as mock_tqdm:

            tracker = ProgressTracker(5, description="Test files")

            assert tracker.enabled is True
            mock_tqdm.assert_called_once_with(
                total=5,
                desc="Test files",
                unit="file",
                leave=False,
                ncols=80,
                ascii=True,
            )

    def test_init_with_tty_disabled(self):
        with patch("json_uploads.services.progress.is_tty_enabled", return_value=False):
            tracker = ProgressTracker(5)

            assert tracker.enabled is False
            assert tracker.pbar is None
            assert tracker.description == "Importing files"

    def test_start_and_finish_with_tty_enabled(self):
        mock_pbar = Mock()

        with patch("json_uploads.services.progress.is_tty_enabled", return_value=True), \
             patch("json_uploads.services.progress.tqdm", return_value=mock_pbar):

            tracker = ProgressTracker(2, description="Importing")
            tracker.start_file("a.json")
            tracker.finish_file(success=True)
            tracker.start_file("b.json")
            tracker.finish_file(success=False)

            assert tracker.started == 2
            assert tracker.completed == 2
            assert (tracker.accepted, tracker.rejected) == (1, 1)
            mock_pbar.set_description.assert_any_call("Importing (a.json)")
            assert mock_pbar.update.call_count == 2
            mock_pbar.set_postfix.assert_called_with(accepted=1, rejected=1)

    def test_counts_without_tty(self):
        with patch("json_uploads.services.progress.is_tty_enabled", return_value=False):
            tracker = ProgressTracker(1)
            tracker.start_file("a.json")
            tracker.finish_file(success=False)

            assert tracker.rejected == 1

    def test_context_manager_closes_bar(self):
        mock_pbar = Mock()

        with patch("json_uploads.services.progress.is_tty_enabled", return_value=True), \
             patch("json_uploads.services.progress.tqdm", return_value=mock_pbar):

            with ProgressTracker(1) as tracker:
                pass

            mock_pbar.close.assert_called_once()
            assert tracker.pbar is None
