"""Tests for recycle bin provider."""

import os
import time
from unittest.mock import Mock

from server.apps.extras.infrastructure import recycle_bin as recycle_bin_module
from server.apps.extras.infrastructure.disk import DiskProvider
from server.apps.extras.infrastructure.recycle_bin import (
    RecycleBinProvider,
    _generate_recycled_name,
)

_DAY_SECONDS = 24 * 60 * 60


def _write(path, content='subtitle'):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class TestRecycledNameGeneration:
    """Tests for _generate_recycled_name function."""

    def test_name_includes_timestamp(self, tmp_path):
        """Test recycled name keeps stem and suffix."""
        name = _generate_recycled_name(
            tmp_path / 'Film.en.srt',
            '20260131T143052123456',
        )

        assert name == 'Film.en__20260131T143052123456.srt'

    def test_name_with_counter(self, tmp_path):
        """Test counter goes between timestamp and suffix."""
        name = _generate_recycled_name(
            tmp_path / 'Film.en.srt',
            '20260131T143052123456',
            2,
        )

        assert name == 'Film.en__20260131T143052123456_2.srt'


class TestDeleteFile:
    """Tests for RecycleBinProvider.delete_file."""

    def test_moves_file_into_bin(self, tmp_path):
        """Test file is moved, bin created, content kept."""
        source = _write(tmp_path / 'movies' / 'Film.en.srt')
        bin_dir = tmp_path / 'recycle'

        destination = RecycleBinProvider(location=bin_dir).delete_file(source)

        assert not source.exists()
        assert destination.parent == bin_dir
        assert destination.read_text() == 'subtitle'

    def test_touches_recycled_file(self, tmp_path):
        """Test retention counts from the moment of recycling."""
        source = _write(tmp_path / 'movies' / 'Film.en.srt')
        old = time.time() - 30 * _DAY_SECONDS
        os.utime(source, (old, old))

        destination = RecycleBinProvider(
            location=tmp_path / 'recycle',
        ).delete_file(source)

        assert destination.stat().st_mtime > old + _DAY_SECONDS

    def test_location_from_settings(self, tmp_path, settings):
        """Test EXTRAS_RECYCLE_BIN is used when no location is given."""
        settings.EXTRAS_RECYCLE_BIN = str(tmp_path / 'configured')
        source = _write(tmp_path / 'Film.srt')

        destination = RecycleBinProvider().delete_file(source)

        assert destination.parent == tmp_path / 'configured'

    def test_unconfigured_deletes_permanently(self, tmp_path, settings):
        """Test no recycle bin means permanent deletion."""
        settings.EXTRAS_RECYCLE_BIN = ''
        source = _write(tmp_path / 'Film.srt')
        disk_provider = Mock(wraps=DiskProvider())

        result = RecycleBinProvider(disk_provider).delete_file(source)

        assert result is None
        assert not source.exists()
        disk_provider.delete_file.assert_called_once_with(source)


class TestListExpired:
    """Tests for RecycleBinProvider.list_expired."""

    def test_lists_only_old_files(self, tmp_path):
        """Test files past retention are listed, oldest first."""
        bin_dir = tmp_path / 'recycle'
        older = _write(bin_dir / 'older.srt')
        old = _write(bin_dir / 'old.srt')
        _write(bin_dir / 'fresh.srt')
        now = time.time()
        os.utime(older, (now - 20 * _DAY_SECONDS, now - 20 * _DAY_SECONDS))
        os.utime(old, (now - 10 * _DAY_SECONDS, now - 10 * _DAY_SECONDS))

        expired = RecycleBinProvider(location=bin_dir).list_expired(7)

        assert expired == [older, old]

    def test_missing_bin_is_empty(self, tmp_path):
        """Test a bin that was never created has nothing to clean."""
        recycle_bin = RecycleBinProvider(location=tmp_path / 'recycle')

        assert recycle_bin.list_expired(7) == []

    def test_unconfigured_bin_is_empty(self, settings):
        """Test no recycle bin has nothing to clean."""
        settings.EXTRAS_RECYCLE_BIN = ''

        assert RecycleBinProvider().list_expired(7) == []


class TestNameCollisions:
    """Tests for recycling files that would share a name."""

    def test_same_name_same_moment_keeps_both(self, tmp_path, monkeypatch):
        """Test same-named files recycled in one tick are both kept."""
        monkeypatch.setattr(
            recycle_bin_module,
            '_recycle_timestamp',
            lambda: '20260131T143052123456',
        )
        first = _write(tmp_path / 'movies' / 'Subs' / 'Film.srt', 'first')
        second = _write(tmp_path / 'movies' / 'Film.srt', 'second')
        recycle_bin = RecycleBinProvider(location=tmp_path / 'recycle')

        first_destination = recycle_bin.delete_file(first)
        second_destination = recycle_bin.delete_file(second)

        assert first_destination.name == 'Film__20260131T143052123456.srt'
        assert second_destination.name == 'Film__20260131T143052123456_1.srt'
        assert first_destination.read_text() == 'first'
        assert second_destination.read_text() == 'second'
