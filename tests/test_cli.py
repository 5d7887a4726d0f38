import os

import pytest

from pipex.cli import (
    COMMAND_NOT_FOUND_STATUS,
    PipelineError,
    main,
    open_infile,
    open_outfile,
    run_pipeline,
)

CONTENT = "hello world\nsecond line\n"


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text(CONTENT)
    return path


def test_open_infile_reads_content(infile):
    with open_infile(str(infile)) as handle:
        assert handle.read() == CONTENT.encode()


def test_open_infile_missing(tmp_path):
    with pytest.raises(PipelineError):
        open_infile(str(tmp_path / "missing"))


def test_open_outfile_truncates(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("old contents")
    with open_outfile(str(path)) as handle:
        handle.write(b"new")
    assert path.read_text() == "new"


def test_open_outfile_bad_directory(tmp_path):
    with pytest.raises(PipelineError):
        open_outfile(str(tmp_path / "nodir" / "out.txt"))


def test_run_pipeline_transforms(infile, tmp_path):
    out = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "cat", "tr a-z A-Z", str(out), os.environ)
    assert status == 0
    assert out.read_text() == CONTENT.upper()


def test_run_pipeline_missing_infile_still_creates_outfile(tmp_path):
    out = tmp_path / "out.txt"
    with pytest.raises(PipelineError):
        run_pipeline(str(tmp_path / "missing"), "cat", "cat", str(out), os.environ)
    assert out.exists()
    assert out.read_text() == ""


def test_run_pipeline_missing_second_command(infile, tmp_path):
    out = tmp_path / "out.txt"
    status = run_pipeline(
        str(infile), "cat", "no-such-command-xyz", str(out), os.environ
    )
    assert status == COMMAND_NOT_FOUND_STATUS
    assert out.read_text() == ""


def test_run_pipeline_missing_first_command(infile, tmp_path):
    out = tmp_path / "out.txt"
    status = run_pipeline(
        str(infile), "no-such-command-xyz", "cat", str(out), os.environ
    )
    assert status == 0
    assert out.read_text() == ""


def test_main_wrong_argument_count():
    assert main(["only", "three", "args"]) == 1


def test_main_runs_pipeline(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(out)]) == 0
    assert out.read_text() == CONTENT


def test_main_missing_infile(tmp_path):
    out = tmp_path / "out.txt"
    assert main([str(tmp_path / "missing"), "cat", "cat", str(out)]) == 1