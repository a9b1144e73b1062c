import shutil
import tempfile

import pytest

from import_rewriter.exceptions import DiffError
from import_rewriter.utils.diff_utils import diff


@pytest.fixture
def private_tempdir(tmp_path, monkeypatch):
    temp_dir = tmp_path / "tmp"
    temp_dir.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(temp_dir))
    return temp_dir


class TestDiff:

    @pytest.mark.skipif(shutil.which("diff") is None, reason="diff program not available")
    def test_unified_output(self, private_tempdir):
        data = diff(b"a\nb\n", b"a\nc\n")
        assert b"-b\n" in data
        assert b"+c\n" in data
        assert list(private_tempdir.iterdir()) == []

    @pytest.mark.skipif(shutil.which("diff") is None, reason="diff program not available")
    def test_identical_inputs(self, private_tempdir):
        assert diff(b"same\n", b"same\n") == b""
        assert list(private_tempdir.iterdir()) == []

    def test_missing_program_raises_and_cleans_up(self, private_tempdir):
        with pytest.raises(DiffError):
            diff(b"a", b"b", command="definitely-not-a-diff-program")
        assert list(private_tempdir.iterdir()) == []

    @pytest.mark.skipif(shutil.which("false") is None, reason="false program not available")
    def test_silent_failure_raises(self, private_tempdir):
        with pytest.raises(DiffError):
            diff(b"a", b"b", command="false")
        assert list(private_tempdir.iterdir()) == []

    def test_temp_prefix(self, private_tempdir, monkeypatch):
        seen = []
        real_mkstemp = tempfile.mkstemp

        def recording_mkstemp(*args, **kwargs):
            fd, name = real_mkstemp(*args, **kwargs)
            seen.append(name)
            return fd, name

        monkeypatch.setattr(tempfile, "mkstemp", recording_mkstemp)
        with pytest.raises(DiffError):
            diff(b"a", b"b", command="definitely-not-a-diff-program", prefix="gofmt")
        assert len(seen) == 2
        assert all(name.split("/")[-1].startswith("gofmt") for name in seen)
